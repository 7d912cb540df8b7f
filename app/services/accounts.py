"""Registration and login."""
import logging
import re

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.auth import AuthContext
from app.core.errors import InvalidCredentials, InvalidInput, Unauthorized
from app.core.security import MAX_PASSWORD_BYTES, TokenService, hash_password, verify_password
from app.db.identity import UserStore
from app.schemas.user import AuthDataSchema, UserSchema

logger = logging.getLogger(__name__)

EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def normalize_email(email: str | None) -> str:
    return (email or "").strip().lower()


class AccountService:
    def __init__(self, db: AsyncSession, tokens: TokenService):
        self.db = db
        self.tokens = tokens
        self.users = UserStore(db)

    async def register(self, name: str, email: str, password: str) -> UserSchema:
        """Create a user; an already-registered email raises DuplicateEmail."""
        email_norm = normalize_email(email)
        name = (name or "").strip()
        pwd = password or ""

        if not name:
            raise InvalidInput("Name must not be empty")
        if not EMAIL_RE.match(email_norm):
            raise InvalidInput("Email address is not valid")
        if not pwd:
            raise InvalidInput("Password must not be empty")
        if len(pwd.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise InvalidInput(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")

        user = await self.users.create(name, email_norm, hash_password(pwd))
        await self.db.commit()
        logger.info("Registered user %s", user.id)
        return user

    async def login(self, email: str, password: str) -> AuthDataSchema:
        """Check credentials and issue a token; unknown email and wrong password look alike."""
        user = await self.users.find_by_email(normalize_email(email))
        if user is None or not verify_password(password or "", user.hashed_password):
            logger.warning("Failed login attempt")
            raise InvalidCredentials()
        return AuthDataSchema(token=self.tokens.issue(user.id), user_id=user.id)

    async def me(self, auth: AuthContext) -> UserSchema:
        user = await self.users.get(auth.require_user_id())
        if user is None:
            raise Unauthorized()
        return user
