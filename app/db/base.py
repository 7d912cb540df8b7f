"""SQLAlchemy declarative base with every model registered on its metadata."""
from app.db.session import Base

# Import all models so create_all sees them
from app.models.course import Course  # noqa: F401
from app.models.user import User  # noqa: F401

__all__ = ["Base", "User", "Course"]
