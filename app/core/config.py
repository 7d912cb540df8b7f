"""Application configuration from environment."""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """App settings loaded from env / .env."""

    app_name: str = "E-Learning GraphQL API"
    debug: bool = False

    # Server (used by the elearning-api script)
    host: str = "127.0.0.1"
    port: int = 8000

    # Database (async driver required)
    database_url: str = "sqlite+aiosqlite:///./elearning.db"

    # JWT
    secret_key: str = "change-me-in-production-use-env"
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24  # 24 hours

    # Logging
    log_level: str = "INFO"

    # GraphiQL explorer on GET /graphql
    graphiql: bool = True

    # Insert demo courses on startup when the catalog is empty
    seed_demo_courses: bool = True

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


def get_settings() -> Settings:
    return Settings()
