"""Catalog store: course documents. Never commits; callers own the transaction."""
import uuid

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.course import Course
from app.schemas.course import CourseCreateSchema, CourseSchema, QuizSchema


def _to_schema(row: Course) -> CourseSchema:
    return CourseSchema(
        id=row.id,
        title=row.title,
        description=row.description,
        category=row.category,
        lessons=list(row.lessons or []),
        quizzes=[QuizSchema(**item) for item in (row.quizzes or [])],
        enrolled_students=list(row.enrolled_students or []),
    )


class CourseStore:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_courses(self, category: str | None = None) -> list[CourseSchema]:
        """All courses, oldest first, optionally with an exact category match."""
        query = select(Course).order_by(Course.created_at.asc(), Course.title.asc())
        if category is not None:
            query = query.where(Course.category == category)
        result = await self.db.execute(query)
        return [_to_schema(row) for row in result.scalars().all()]

    async def count(self) -> int:
        result = await self.db.execute(select(func.count(Course.id)))
        return result.scalar_one()

    async def get(self, course_id: str, for_update: bool = False) -> CourseSchema | None:
        """Load one course. ``for_update`` reads the committed row and locks it until commit."""
        if not for_update:
            row = await self.db.get(Course, course_id)
        else:
            result = await self.db.execute(
                select(Course)
                .where(Course.id == course_id)
                .with_for_update()
                .execution_options(populate_existing=True)
            )
            row = result.scalar_one_or_none()
        return _to_schema(row) if row else None

    async def get_many(self, course_ids: list[str]) -> list[CourseSchema]:
        """Resolve ids to courses in the given order; unknown ids are skipped."""
        if not course_ids:
            return []
        result = await self.db.execute(select(Course).where(Course.id.in_(course_ids)))
        by_id = {row.id: row for row in result.scalars().all()}
        return [_to_schema(by_id[cid]) for cid in course_ids if cid in by_id]

    async def create(self, data: CourseCreateSchema) -> CourseSchema:
        row = Course(
            id=uuid.uuid4().hex,
            title=data.title,
            description=data.description,
            category=data.category,
            lessons=list(data.lessons),
            quizzes=[quiz.model_dump() for quiz in data.quizzes],
            enrolled_students=[],
        )
        self.db.add(row)
        await self.db.flush()
        return _to_schema(row)

    async def save(self, course: CourseSchema) -> None:
        """Overwrite the stored document with ``course`` (last writer wins)."""
        row = await self.db.get(Course, course.id)
        if row is None:
            raise LookupError(f"Course {course.id} does not exist")
        row.title = course.title
        row.description = course.description
        row.category = course.category
        row.lessons = list(course.lessons)
        row.quizzes = [quiz.model_dump() for quiz in course.quizzes]
        row.enrolled_students = list(course.enrolled_students)
        await self.db.flush()
