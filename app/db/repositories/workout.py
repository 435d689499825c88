"""
Workout repository.

Handles database operations for :class:`Workout`, including the
aggregation queries used by the dashboard.
"""

import datetime
from typing import Optional

from sqlalchemy import func
from sqlmodel import Session, col, select

from app.models.workout import Workout


class WorkoutRepository:
    """Repository for Workout database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, workout: Workout) -> Workout:
        self.session.add(workout)
        self.session.commit()
        self.session.refresh(workout)
        return workout

    def get_owned(self, user_id: str, workout_id: str) -> Optional[Workout]:
        statement = select(Workout).where(Workout.id == workout_id, Workout.user_id == user_id)
        return self.session.exec(statement).first()

    def list_for_user(self, user_id: str, exercise: Optional[str] = None, skip: int = 0,
                      limit: int = 100, ) -> list[Workout]:
        statement = select(Workout).where(Workout.user_id == user_id)
        if exercise is not None:
            statement = statement.where(Workout.exercise == exercise)
        statement = (statement.order_by(col(Workout.performed_at).desc(), col(Workout.created_at).desc())
                     .offset(skip).limit(limit))
        return list(self.session.exec(statement).all())

    def update(self, workout: Workout) -> Workout:
        self.session.add(workout)
        self.session.commit()
        self.session.refresh(workout)
        return workout

    def delete(self, workout: Workout) -> None:
        self.session.delete(workout)
        self.session.commit()

    def delete_all_for_user(self, user_id: str, commit: bool = True) -> None:
        for workout in self.session.exec(select(Workout).where(Workout.user_id == user_id)).all():
            self.session.delete(workout)
        if commit:
            self.session.commit()

    # ------------------------------------------------------------------
    # Aggregation queries for the dashboard
    # ------------------------------------------------------------------

    def count_for_user(self, user_id: str) -> int:
        statement = select(func.count()).select_from(Workout).where(Workout.user_id == user_id)
        return self.session.exec(statement).first() or 0

    def best_weight(self, user_id: str, exercise: str) -> float:
        """Heaviest weight logged for the exercise, 0.0 when there is none."""
        statement = select(func.max(Workout.weight)).where(Workout.user_id == user_id, Workout.exercise == exercise)
        best = self.session.exec(statement).first()
        return float(best) if best is not None else 0.0

    def last_performed_at(self, user_id: str) -> Optional[datetime.datetime]:
        statement = select(func.max(Workout.performed_at)).where(Workout.user_id == user_id)
        return self.session.exec(statement).first()
