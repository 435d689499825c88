"""Pydantic schemas for request/response validation."""

from app.schemas.token import AuthResponse, RefreshRequest, Token
from app.schemas.user import MeResponse, PasswordChange, UserCreate, UserLogin, UserResponse
from app.schemas.exercise import ExerciseCreate, ExerciseResponse
from app.schemas.plan import (
    PlanCommentCreate,
    PlanCommentResponse,
    PlanCreate,
    PlanResponse,
    PlanUpdate,
    PlanVersionResponse,
)
from app.schemas.workout import WorkoutCreate, WorkoutResponse, WorkoutUpdate
from app.schemas.coach import AthleteLinkCreate, AthleteResponse, CoachLinkResponse
from app.schemas.profile import (
    ProfileResponse,
    ProfileUpdate,
    PublicProfileResponse,
    UserSearchResult,
    UserSummary,
)
from app.schemas.dashboard import DashboardResponse, LiftStat
from app.schemas.health import HealthResponse

__all__ = [
    "AuthResponse",
    "RefreshRequest",
    "Token",
    "MeResponse",
    "PasswordChange",
    "UserCreate",
    "UserLogin",
    "UserResponse",
    "ExerciseCreate",
    "ExerciseResponse",
    "PlanCommentCreate",
    "PlanCommentResponse",
    "PlanCreate",
    "PlanResponse",
    "PlanUpdate",
    "PlanVersionResponse",
    "WorkoutCreate",
    "WorkoutResponse",
    "WorkoutUpdate",
    "AthleteLinkCreate",
    "AthleteResponse",
    "CoachLinkResponse",
    "ProfileResponse",
    "ProfileUpdate",
    "PublicProfileResponse",
    "UserSearchResult",
    "UserSummary",
    "DashboardResponse",
    "LiftStat",
    "HealthResponse",
]
