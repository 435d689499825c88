"""Database repositories."""

from app.db.repositories.user import UserRepository
from app.db.repositories.refresh_token import RefreshTokenRepository
from app.db.repositories.exercise import ExerciseRepository
from app.db.repositories.plan import PlanRepository
from app.db.repositories.workout import WorkoutRepository
from app.db.repositories.coach_link import CoachLinkRepository
from app.db.repositories.user_profile import UserProfileRepository
from app.db.repositories.user_follow import UserFollowRepository

__all__ = [
    "UserRepository",
    "RefreshTokenRepository",
    "ExerciseRepository",
    "PlanRepository",
    "WorkoutRepository",
    "CoachLinkRepository",
    "UserProfileRepository",
    "UserFollowRepository",
]
