"""Business logic services."""

from app.services.user_service import UserService
from app.services.exercise_service import ExerciseService
from app.services.dashboard_service import DashboardService
from app.services.plan_service import PlanService
from app.services.workout_service import WorkoutService
from app.services.coach_service import CoachService
from app.services.social_service import SocialService

__all__ = [
    "UserService",
    "ExerciseService",
    "DashboardService",
    "PlanService",
    "WorkoutService",
    "CoachService",
    "SocialService",
]
