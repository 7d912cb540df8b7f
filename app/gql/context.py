"""Per-request GraphQL context: auth state plus factories for session-bound services.

Sibling query fields resolve concurrently and an ``AsyncSession`` must not be
shared across tasks, so every resolver opens its own session.
"""
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from strawberry.fastapi import BaseContext

from app.core.auth import AuthContext, get_auth_context
from app.core.security import TokenService
from app.services.accounts import AccountService
from app.services.learning import LearningService


class GraphQLContext(BaseContext):
    def __init__(
        self,
        auth: AuthContext,
        sessionmaker: async_sessionmaker[AsyncSession],
        tokens: TokenService,
    ):
        super().__init__()
        self.auth = auth
        self.sessionmaker = sessionmaker
        self.tokens = tokens

    @asynccontextmanager
    async def accounts(self) -> AsyncIterator[AccountService]:
        async with self.sessionmaker() as db:
            yield AccountService(db, self.tokens)

    @asynccontextmanager
    async def learning(self) -> AsyncIterator[LearningService]:
        async with self.sessionmaker() as db:
            yield LearningService(db)


async def get_context(
    request: Request,
    auth: Annotated[AuthContext, Depends(get_auth_context)],
) -> GraphQLContext:
    return GraphQLContext(
        auth=auth,
        sessionmaker=request.app.state.sessionmaker,
        tokens=request.app.state.tokens,
    )
