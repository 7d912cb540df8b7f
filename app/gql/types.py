"""GraphQL object and input types, built from the pydantic documents."""
import strawberry

from app.schemas.course import CourseSchema, QuizSchema
from app.schemas.user import AuthDataSchema, ProgressSchema, UserSchema


@strawberry.type
class Quiz:
    question: str
    options: list[str]
    answer: str

    @classmethod
    def from_schema(cls, quiz: QuizSchema) -> "Quiz":
        return cls(question=quiz.question, options=list(quiz.options), answer=quiz.answer)


@strawberry.input
class QuizInput:
    question: str
    options: list[str]
    answer: str

    def to_schema(self) -> QuizSchema:
        return QuizSchema(question=self.question, options=list(self.options), answer=self.answer)


@strawberry.type
class Course:
    id: strawberry.ID
    title: str
    description: str | None
    category: str | None
    lessons: list[str]
    quizzes: list[Quiz]
    enrolled_students: list[strawberry.ID]

    @classmethod
    def from_schema(cls, course: CourseSchema) -> "Course":
        return cls(
            id=strawberry.ID(course.id),
            title=course.title,
            description=course.description,
            category=course.category,
            lessons=list(course.lessons),
            quizzes=[Quiz.from_schema(q) for q in course.quizzes],
            enrolled_students=[strawberry.ID(uid) for uid in course.enrolled_students],
        )


@strawberry.type
class Progress:
    course_id: strawberry.ID
    completed_lessons: list[str]

    @classmethod
    def from_schema(cls, progress: ProgressSchema) -> "Progress":
        return cls(
            course_id=strawberry.ID(progress.course_id),
            completed_lessons=list(progress.completed_lessons),
        )


@strawberry.type
class User:
    """A registered learner. The password hash is never exposed."""

    id: strawberry.ID
    name: str
    email: str
    enrolled_courses: list[strawberry.ID]
    progress: list[Progress]

    @classmethod
    def from_schema(cls, user: UserSchema) -> "User":
        return cls(
            id=strawberry.ID(user.id),
            name=user.name,
            email=user.email,
            enrolled_courses=[strawberry.ID(cid) for cid in user.enrolled_courses],
            progress=[Progress.from_schema(p) for p in user.progress],
        )


@strawberry.type
class AuthData:
    token: str
    user_id: strawberry.ID

    @classmethod
    def from_schema(cls, data: AuthDataSchema) -> "AuthData":
        return cls(token=data.token, user_id=strawberry.ID(data.user_id))
