"""Course document: lessons, quizzes and the enrolled-student list."""
from sqlalchemy import Column, String, Text, DateTime, JSON
from sqlalchemy.sql import func

from app.db.session import Base


class Course(Base):
    __tablename__ = "courses"

    id = Column(String(32), primary_key=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    category = Column(String(64), nullable=True, index=True)
    # lesson names, not foreign keys
    lessons = Column(JSON, nullable=False, default=list)
    # list of {"question": str, "options": [str], "answer": str}
    quizzes = Column(JSON, nullable=False, default=list)
    # ordered list of user ids
    enrolled_students = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=True)
