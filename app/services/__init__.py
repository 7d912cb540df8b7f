from app.services.accounts import AccountService
from app.services.learning import LearningService
from app.services.seeding import seed_courses

__all__ = ["AccountService", "LearningService", "seed_courses"]
