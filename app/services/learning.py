"""Enrollment and lesson-progress rules across the identity and catalog stores.

A user's ``enrolled_courses`` and a course's ``enrolled_students`` are two views
of the same relation. ``enroll`` writes both documents and commits them in one
transaction, so a failure leaves neither side changed. The course is re-read
under lock after the user write, so concurrent enrollments in one course all
land in ``enrolled_students``.
"""
import logging

from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.auth import AuthContext
from app.core.errors import CourseNotFound, InvalidInput, NoSuchProgress, Unauthorized
from app.db.catalog import CourseStore
from app.db.identity import UserStore
from app.schemas.course import CourseCreateSchema, CourseSchema, QuizSchema
from app.schemas.user import ProgressSchema, UserSchema

logger = logging.getLogger(__name__)


class LearningService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.users = UserStore(db)
        self.catalog = CourseStore(db)

    async def _current_user(self, auth: AuthContext) -> UserSchema:
        user = await self.users.get(auth.require_user_id())
        if user is None:
            # token outlived its user
            raise Unauthorized()
        return user

    async def courses(self, category: str | None = None) -> list[CourseSchema]:
        return await self.catalog.list_courses(category)

    async def course(self, course_id: str) -> CourseSchema | None:
        return await self.catalog.get(course_id)

    async def create_course(
        self,
        auth: AuthContext,
        title: str,
        description: str | None = None,
        category: str | None = None,
        lessons: list[str] | None = None,
        quizzes: list[QuizSchema] | None = None,
    ) -> CourseSchema:
        await self._current_user(auth)
        try:
            data = CourseCreateSchema(
                title=title,
                description=description,
                category=category,
                lessons=lessons or [],
                quizzes=quizzes or [],
            )
        except ValidationError as exc:
            raise InvalidInput(f"Invalid course: {exc.errors()[0]['msg']}") from exc
        course = await self.catalog.create(data)
        await self.db.commit()
        logger.info("Created course %s (%s)", course.id, course.title)
        return course

    async def enroll(self, auth: AuthContext, course_id: str) -> CourseSchema:
        """Enroll the current user. Enrolling twice is a no-op returning the course."""
        user = await self.users.get(auth.require_user_id(), for_update=True)
        if user is None:
            raise Unauthorized()
        course = await self.catalog.get(course_id)
        if course is None:
            raise CourseNotFound()

        if course_id in user.enrolled_courses:
            return course

        user.enrolled_courses.append(course_id)
        if user.progress_for(course_id) is None:
            user.progress.append(ProgressSchema(course_id=course_id))
        await self.users.save(user)

        # The user write holds the write lock; re-read the course so a
        # concurrent enrollment is merged instead of overwritten.
        course = await self.catalog.get(course_id, for_update=True)
        if user.id not in course.enrolled_students:
            course.enrolled_students.append(user.id)
        await self.catalog.save(course)
        await self.db.commit()
        logger.info("User %s enrolled in course %s", user.id, course_id)
        return course

    async def complete_lesson(self, auth: AuthContext, course_id: str, lesson: str) -> ProgressSchema:
        user = await self._current_user(auth)
        progress = user.progress_for(course_id)
        if progress is None:
            raise NoSuchProgress()

        if progress.mark_completed(lesson):
            await self.users.save(user)
            await self.db.commit()
            logger.info("User %s completed lesson %r in course %s", user.id, lesson, course_id)
        return progress

    async def my_progress(self, auth: AuthContext, course_id: str) -> ProgressSchema:
        user = await self._current_user(auth)
        progress = user.progress_for(course_id)
        if progress is None:
            raise NoSuchProgress()
        return progress

    async def my_courses(self, auth: AuthContext) -> list[CourseSchema]:
        user = await self._current_user(auth)
        return await self.catalog.get_many(user.enrolled_courses)
