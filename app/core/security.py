"""Password hashing and signed identity tokens (JWT bearer auth)."""
import logging
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt
from passlib.context import CryptContext

from app.core.config import Settings

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# bcrypt hard limit (UTF-8 bytes)
MAX_PASSWORD_BYTES = 72


def verify_password(plain: str, hashed: str) -> bool:
    return pwd_context.verify(plain, hashed)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


class TokenService:
    """Issues and verifies signed tokens carrying a user id.

    Stateless: a token is valid while its signature checks out and its
    absolute expiry has not passed.
    """

    def __init__(self, secret_key: str, algorithm: str = "HS256", expire_minutes: int = 60 * 24):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expire_minutes = expire_minutes

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenService":
        return cls(
            secret_key=settings.secret_key,
            algorithm=settings.algorithm,
            expire_minutes=settings.access_token_expire_minutes,
        )

    def issue(self, user_id: str) -> str:
        now = datetime.now(timezone.utc)
        expire = now + timedelta(minutes=self.expire_minutes)
        to_encode = {"sub": str(user_id), "iat": now, "exp": expire, "type": "access"}
        return jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> str | None:
        """Return the user id if the token is valid; None otherwise."""
        if not token:
            return None
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError as exc:
            logger.debug("Rejected token: %s", exc)
            return None
        subject = payload.get("sub")
        if not subject or payload.get("type") != "access":
            return None
        return str(subject)
