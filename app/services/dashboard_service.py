"""
Dashboard service.

Aggregates the user's best weight on each base lift together with
plan and workout counts.
"""

from sqlmodel import Session

from app.db.repositories.plan import PlanRepository
from app.db.repositories.workout import WorkoutRepository
from app.schemas.dashboard import DashboardResponse, LiftStat
from app.services.exercise_service import BASE_EXERCISES, ExerciseService


class DashboardService:

    def __init__(self, session: Session):
        self.exercise_service = ExerciseService(session)
        self.workout_repo = WorkoutRepository(session)
        self.plan_repo = PlanRepository(session)

    def get(self, user_id: str) -> DashboardResponse:
        self.exercise_service.ensure_base_exercises(user_id)

        stats = [LiftStat(exercise=lift, best_weight=self.workout_repo.best_weight(user_id, lift))
                 for lift in BASE_EXERCISES]

        return DashboardResponse(stats=stats, plans_count=self.plan_repo.count_for_user(user_id),
                                 workouts_count=self.workout_repo.count_for_user(user_id),
                                 last_workout_at=self.workout_repo.last_performed_at(user_id), )
