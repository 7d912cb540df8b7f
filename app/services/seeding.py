"""Demo catalog inserted on startup when no courses exist."""
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.db.catalog import CourseStore
from app.schemas.course import CourseCreateSchema, QuizSchema

logger = logging.getLogger(__name__)

DEMO_COURSES = [
    CourseCreateSchema(
        title="Algebra Basics",
        description="Variables, expressions and linear equations.",
        category="math",
        lessons=["Variables", "Expressions", "Linear equations"],
        quizzes=[
            QuizSchema(question="Solve 2x + 3 = 7", options=["x = 1", "x = 2", "x = 5"], answer="x = 2"),
        ],
    ),
    CourseCreateSchema(
        title="Intro to Python",
        description="Write and run your first programs.",
        category="programming",
        lessons=["Hello world", "Variables and types", "Loops", "Functions"],
        quizzes=[
            QuizSchema(question="Which keyword defines a function?", options=["func", "def", "fn"], answer="def"),
        ],
    ),
    CourseCreateSchema(
        title="World History 101",
        description="From the first cities to the modern era.",
        category="history",
        lessons=["Ancient civilisations", "Middle ages", "Industrial revolution"],
    ),
]


async def seed_courses(db: AsyncSession) -> int:
    """Insert the demo catalog into an empty store. Returns how many were added."""
    catalog = CourseStore(db)
    if await catalog.count() > 0:
        return 0

    for data in DEMO_COURSES:
        await catalog.create(data)
    await db.commit()
    logger.info("Seeded %d demo courses", len(DEMO_COURSES))
    return len(DEMO_COURSES)
