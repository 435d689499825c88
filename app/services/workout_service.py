"""
Workout service.

Create and update are full writes: fields missing from the body take
their defaults (empty notes, ``performed_at`` = now).
"""

import datetime
from typing import Optional

from fastapi import HTTPException, status
from sqlmodel import Session

from app.db.repositories.workout import WorkoutRepository
from app.models.workout import Workout
from app.schemas.workout import WorkoutCreate, WorkoutResponse, WorkoutUpdate


def _to_naive_utc(value: Optional[datetime.datetime], default: datetime.datetime) -> datetime.datetime:
    """Timestamps are stored as naive UTC."""
    if value is None:
        return default
    if value.tzinfo is not None:
        return value.astimezone(datetime.timezone.utc).replace(tzinfo=None)
    return value


class WorkoutService:
    """Service for workout business logic."""

    def __init__(self, session: Session):
        self.repository = WorkoutRepository(session)

    def list_for_user(self, user_id: str, exercise: Optional[str] = None, skip: int = 0,
             limit: int = 100, ) -> list[WorkoutResponse]:
        entries = self.repository.list_for_user(user_id, exercise=exercise, skip=skip, limit=limit)
        return [WorkoutResponse.model_validate(w) for w in entries]

    def create(self, user_id: str, data: WorkoutCreate) -> WorkoutResponse:
        now = datetime.datetime.utcnow()
        workout = Workout(user_id=user_id, exercise=data.exercise, reps=data.reps, weight=data.weight,
                          notes=data.notes or "", performed_at=_to_naive_utc(data.performed_at, now),
                          created_at=now, updated_at=now, )
        workout = self.repository.create(workout)
        return WorkoutResponse.model_validate(workout)

    def update(self, user_id: str, workout_id: str, data: WorkoutUpdate) -> WorkoutResponse:
        workout = self._get_owned_workout(user_id, workout_id)
        now = datetime.datetime.utcnow()

        workout.exercise = data.exercise
        workout.reps = data.reps
        workout.weight = data.weight
        workout.notes = data.notes or ""
        workout.performed_at = _to_naive_utc(data.performed_at, now)
        workout.updated_at = now

        workout = self.repository.update(workout)
        return WorkoutResponse.model_validate(workout)

    def delete(self, user_id: str, workout_id: str) -> None:
        workout = self._get_owned_workout(user_id, workout_id)
        self.repository.delete(workout)

    def _get_owned_workout(self, user_id: str, workout_id: str) -> Workout:
        workout = self.repository.get_owned(user_id, workout_id)
        if not workout:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Workout not found")
        return workout
