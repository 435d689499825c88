"""SQLModel database models."""

from app.models.user import User
from app.models.refresh_token import RefreshToken
from app.models.exercise import Exercise
from app.models.plan import Plan, PlanComment, PlanStatus, PlanVersion
from app.models.workout import Workout
from app.models.coach_link import CoachLink
from app.models.user_profile import UserProfile
from app.models.user_follow import UserFollow

__all__ = [
    "User",
    "RefreshToken",
    "Exercise",
    "Plan",
    "PlanComment",
    "PlanStatus",
    "PlanVersion",
    "Workout",
    "CoachLink",
    "UserProfile",
    "UserFollow",
]
