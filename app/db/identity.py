"""Identity store: user documents with embedded enrollments and progress.

The store never commits; callers own the transaction.
"""
import uuid

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import DuplicateEmail
from app.models.user import User
from app.schemas.user import ProgressSchema, UserSchema


def _to_schema(row: User) -> UserSchema:
    # copy every list so edits on the document never alias ORM committed state
    return UserSchema(
        id=row.id,
        name=row.name,
        email=row.email,
        hashed_password=row.hashed_password,
        enrolled_courses=list(row.enrolled_courses or []),
        progress=[
            ProgressSchema(
                course_id=item["course_id"],
                completed_lessons=list(item.get("completed_lessons") or []),
            )
            for item in (row.progress or [])
        ],
    )


class UserStore:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, name: str, email: str, hashed_password: str) -> UserSchema:
        """Insert a new user; raises DuplicateEmail if the email is taken."""
        if await self.find_by_email(email) is not None:
            raise DuplicateEmail()

        row = User(
            id=uuid.uuid4().hex,
            name=name,
            email=email,
            hashed_password=hashed_password,
            enrolled_courses=[],
            progress=[],
        )
        self.db.add(row)
        try:
            await self.db.flush()
        except IntegrityError as exc:
            # lost a race with a concurrent registration
            await self.db.rollback()
            raise DuplicateEmail() from exc
        return _to_schema(row)

    async def get(self, user_id: str, for_update: bool = False) -> UserSchema | None:
        """Load one user. ``for_update`` reads the committed row and locks it until commit."""
        if not for_update:
            row = await self.db.get(User, user_id)
        else:
            result = await self.db.execute(
                select(User)
                .where(User.id == user_id)
                .with_for_update()
                .execution_options(populate_existing=True)
            )
            row = result.scalar_one_or_none()
        return _to_schema(row) if row else None

    async def find_by_email(self, email: str) -> UserSchema | None:
        result = await self.db.execute(select(User).where(User.email == email))
        row = result.scalar_one_or_none()
        return _to_schema(row) if row else None

    async def save(self, user: UserSchema) -> None:
        """Overwrite the stored document with ``user`` (last writer wins)."""
        row = await self.db.get(User, user.id)
        if row is None:
            raise LookupError(f"User {user.id} does not exist")
        row.name = user.name
        row.email = user.email
        row.hashed_password = user.hashed_password
        row.enrolled_courses = list(user.enrolled_courses)
        row.progress = [item.model_dump() for item in user.progress]
        await self.db.flush()
