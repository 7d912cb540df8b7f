"""E-Learning GraphQL API - FastAPI app entry point."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.core.config import Settings, get_settings
from app.core.logging import setup_logging
from app.core.security import TokenService
from app.db.base import Base
from app.db.session import build_engine, build_sessionmaker
from app.routers.graphql import build_router
from app.services.seeding import seed_courses

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        engine = build_engine(settings.database_url, echo=settings.debug)
        app.state.engine = engine
        app.state.sessionmaker = build_sessionmaker(engine)

        # create tables (async)
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

        if settings.seed_demo_courses:
            async with app.state.sessionmaker() as db:
                await seed_courses(db)

        logger.info("%s started", settings.app_name)
        yield
        await engine.dispose()

    app = FastAPI(
        title=settings.app_name,
        description="Course catalog, enrollment and lesson progress over GraphQL",
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.tokens = TokenService.from_settings(settings)

    app.include_router(build_router(settings), prefix="/graphql")

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


app = create_app()
