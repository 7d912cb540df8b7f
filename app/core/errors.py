"""Domain errors surfaced to API callers as per-field failures."""


class AppError(Exception):
    """Base for errors that are the caller's concern, not a server fault."""

    code = "INTERNAL"
    default_message = "Request failed"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class Unauthorized(AppError):
    code = "UNAUTHORIZED"
    default_message = "Authentication required"


class DuplicateEmail(AppError):
    code = "DUPLICATE_EMAIL"
    default_message = "Email is already registered"


class InvalidCredentials(AppError):
    code = "INVALID_CREDENTIALS"
    default_message = "Invalid email or password"


class NoSuchProgress(AppError):
    code = "NO_SUCH_PROGRESS"
    default_message = "No progress recorded for this course; enroll first"


class CourseNotFound(AppError):
    code = "COURSE_NOT_FOUND"
    default_message = "Course not found"


class InvalidInput(AppError):
    code = "BAD_USER_INPUT"
    default_message = "Invalid input"
