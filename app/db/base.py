"""
Base database configuration.

Import all models here so Alembic can detect them for migrations.
"""

# Import all models for Alembic autogenerate
from app.models.user import User  # noqa: F401
from app.models.refresh_token import RefreshToken  # noqa: F401
from app.models.exercise import Exercise  # noqa: F401
from app.models.plan import Plan, PlanComment, PlanVersion  # noqa: F401
from app.models.workout import Workout  # noqa: F401
from app.models.coach_link import CoachLink  # noqa: F401
from app.models.user_profile import UserProfile  # noqa: F401
from app.models.user_follow import UserFollow  # noqa: F401
