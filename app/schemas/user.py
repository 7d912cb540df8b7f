"""Pydantic documents for users, progress and login results."""
from pydantic import BaseModel, Field


class ProgressSchema(BaseModel):
    course_id: str
    # logically a set; kept in first-completion order
    completed_lessons: list[str] = Field(default_factory=list)

    def mark_completed(self, lesson: str) -> bool:
        """Add lesson if absent. Returns True when it was new."""
        if lesson in self.completed_lessons:
            return False
        self.completed_lessons.append(lesson)
        return True


class UserSchema(BaseModel):
    id: str
    name: str
    email: str
    hashed_password: str
    enrolled_courses: list[str] = Field(default_factory=list)
    progress: list[ProgressSchema] = Field(default_factory=list)

    def progress_for(self, course_id: str) -> ProgressSchema | None:
        for item in self.progress:
            if item.course_id == course_id:
                return item
        return None


class AuthDataSchema(BaseModel):
    token: str
    user_id: str
