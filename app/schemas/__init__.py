from app.schemas.course import CourseCreateSchema, CourseSchema, QuizSchema
from app.schemas.user import AuthDataSchema, ProgressSchema, UserSchema

__all__ = [
    "AuthDataSchema",
    "CourseCreateSchema",
    "CourseSchema",
    "ProgressSchema",
    "QuizSchema",
    "UserSchema",
]
