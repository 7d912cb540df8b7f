"""Request gate: turns the Authorization header into an auth context.

The gate never rejects a request. Missing, malformed or expired credentials
all produce an anonymous context; operations that need a user decide for
themselves via ``AuthContext.require_user_id``.
"""
from dataclasses import dataclass

from fastapi import Request

from app.core.errors import Unauthorized
from app.core.security import TokenService


@dataclass(frozen=True)
class AuthContext:
    user_id: str | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.user_id is not None

    def require_user_id(self) -> str:
        if self.user_id is None:
            raise Unauthorized()
        return self.user_id


ANONYMOUS = AuthContext()


def bearer_token(header: str | None) -> str | None:
    """Extract the token from an ``Authorization: Bearer <token>`` value."""
    if not header:
        return None
    scheme, _, token = header.strip().partition(" ")
    if scheme.lower() != "bearer":
        return None
    token = token.strip()
    return token or None


def resolve_auth_context(header: str | None, tokens: TokenService) -> AuthContext:
    token = bearer_token(header)
    if token is None:
        return ANONYMOUS
    user_id = tokens.verify(token)
    if user_id is None:
        return ANONYMOUS
    return AuthContext(user_id=user_id)


async def get_auth_context(request: Request) -> AuthContext:
    """FastAPI dependency run before every GraphQL operation."""
    return resolve_auth_context(request.headers.get("Authorization"), request.app.state.tokens)
