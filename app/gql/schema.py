"""GraphQL Query/Mutation root types and the executable schema.

Top-level fields are nullable: a domain error nulls only the failing field and
is reported in ``errors`` with ``extensions.code`` set from the error class.
"""
import logging

import strawberry
from graphql import GraphQLError
from strawberry.types import ExecutionContext, Info

from app.core.errors import AppError
from app.gql.types import AuthData, Course, Progress, QuizInput, User

logger = logging.getLogger(__name__)


@strawberry.type
class Query:
    @strawberry.field(description="All courses, or those whose category equals the filter.")
    async def courses(self, info: Info, category: str | None = None) -> list[Course] | None:
        async with info.context.learning() as learning:
            docs = await learning.courses(category)
        return [Course.from_schema(doc) for doc in docs]

    @strawberry.field
    async def course(self, info: Info, id: strawberry.ID) -> Course | None:
        async with info.context.learning() as learning:
            doc = await learning.course(str(id))
        return Course.from_schema(doc) if doc else None

    @strawberry.field(description="The signed-in user.")
    async def me(self, info: Info) -> User | None:
        async with info.context.accounts() as accounts:
            user = await accounts.me(info.context.auth)
        return User.from_schema(user)

    @strawberry.field(description="Courses the signed-in user is enrolled in.")
    async def my_courses(self, info: Info) -> list[Course] | None:
        async with info.context.learning() as learning:
            docs = await learning.my_courses(info.context.auth)
        return [Course.from_schema(doc) for doc in docs]

    @strawberry.field(description="The signed-in user's progress in one course.")
    async def my_progress(self, info: Info, course_id: strawberry.ID) -> Progress | None:
        async with info.context.learning() as learning:
            progress = await learning.my_progress(info.context.auth, str(course_id))
        return Progress.from_schema(progress)


@strawberry.type
class Mutation:
    @strawberry.mutation
    async def register(self, info: Info, name: str, email: str, password: str) -> User | None:
        async with info.context.accounts() as accounts:
            user = await accounts.register(name, email, password)
        return User.from_schema(user)

    @strawberry.mutation
    async def login(self, info: Info, email: str, password: str) -> AuthData | None:
        async with info.context.accounts() as accounts:
            data = await accounts.login(email, password)
        return AuthData.from_schema(data)

    @strawberry.mutation(description="Enroll the signed-in user; repeating it changes nothing.")
    async def enroll(self, info: Info, course_id: strawberry.ID) -> Course | None:
        async with info.context.learning() as learning:
            course = await learning.enroll(info.context.auth, str(course_id))
        return Course.from_schema(course)

    @strawberry.mutation
    async def complete_lesson(self, info: Info, course_id: strawberry.ID, lesson: str) -> Progress | None:
        async with info.context.learning() as learning:
            progress = await learning.complete_lesson(info.context.auth, str(course_id), lesson)
        return Progress.from_schema(progress)

    @strawberry.mutation
    async def create_course(
        self,
        info: Info,
        title: str,
        description: str | None = None,
        category: str | None = None,
        lessons: list[str] | None = None,
        quizzes: list[QuizInput] | None = None,
    ) -> Course | None:
        async with info.context.learning() as learning:
            course = await learning.create_course(
                info.context.auth,
                title=title,
                description=description,
                category=category,
                lessons=lessons,
                quizzes=[quiz.to_schema() for quiz in quizzes or []],
            )
        return Course.from_schema(course)


class LearningSchema(strawberry.Schema):
    def process_errors(
        self,
        errors: list[GraphQLError],
        execution_context: ExecutionContext | None = None,
    ) -> None:
        unexpected = []
        for error in errors:
            original = error.original_error
            if isinstance(original, AppError):
                error.extensions = {**(error.extensions or {}), "code": original.code}
                logger.info("%s: %s", original.code, original.message)
            else:
                unexpected.append(error)
        if unexpected:
            super().process_errors(unexpected, execution_context)


schema = LearningSchema(query=Query, mutation=Mutation)
