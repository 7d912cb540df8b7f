"""Pydantic documents for courses and quizzes."""
from pydantic import BaseModel, Field


class QuizSchema(BaseModel):
    question: str
    options: list[str] = Field(default_factory=list)
    answer: str  # plaintext, readable by any caller


class CourseSchema(BaseModel):
    id: str
    title: str
    description: str | None = None
    category: str | None = None
    lessons: list[str] = Field(default_factory=list)
    quizzes: list[QuizSchema] = Field(default_factory=list)
    enrolled_students: list[str] = Field(default_factory=list)


class CourseCreateSchema(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    description: str | None = None
    category: str | None = Field(default=None, max_length=64)
    lessons: list[str] = Field(default_factory=list)
    quizzes: list[QuizSchema] = Field(default_factory=list)
