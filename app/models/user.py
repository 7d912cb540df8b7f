"""User document: credentials plus embedded enrollments and progress."""
from sqlalchemy import Column, String, DateTime, JSON
from sqlalchemy.sql import func

from app.db.session import Base


class User(Base):
    __tablename__ = "users"

    id = Column(String(32), primary_key=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    hashed_password = Column(String(255), nullable=False)
    # ordered list of course ids
    enrolled_courses = Column(JSON, nullable=False, default=list)
    # list of {"course_id": str, "completed_lessons": [str]}, one per enrolled course
    progress = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=True)
