"""
Exercise service.

Every user starts with the three powerlifting base lifts.  They are
seeded lazily the first time the user's exercise list (or the
dashboard) is touched and cannot be deleted.
"""

import logging

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from app.db.repositories.exercise import ExerciseRepository
from app.models.exercise import Exercise
from app.schemas.exercise import ExerciseCreate, ExerciseResponse

logger = logging.getLogger(__name__)

BASE_EXERCISES: tuple[str, ...] = ("Squat", "Bench press", "Deadlift")


class ExerciseService:
    """Service for the per-user exercise catalogue."""

    def __init__(self, session: Session):
        self.session = session
        self.repository = ExerciseRepository(session)

    def ensure_base_exercises(self, user_id: str) -> None:
        """Seed the base lifts for a user who has no exercises yet."""
        if self.repository.count_for_user(user_id) > 0:
            return
        self.repository.create_many([Exercise(user_id=user_id, name=name, is_base=True) for name in BASE_EXERCISES])
        logger.debug("Seeded base exercises for user %s", user_id)

    def list_for_user(self, user_id: str) -> list[ExerciseResponse]:
        self.ensure_base_exercises(user_id)
        return [ExerciseResponse.model_validate(e) for e in self.repository.list_for_user(user_id)]

    def create(self, user_id: str, data: ExerciseCreate) -> ExerciseResponse:
        self.ensure_base_exercises(user_id)

        if self.repository.get_by_user_and_name(user_id, data.name):
            raise HTTPException(status_code=status.HTTP_409_CONFLICT,
                                detail=f"Exercise '{data.name}' already exists", )
        try:
            exercise = self.repository.create(Exercise(user_id=user_id, name=data.name, is_base=False))
        except IntegrityError:
            self.session.rollback()
            raise HTTPException(status_code=status.HTTP_409_CONFLICT,
                                detail=f"Exercise '{data.name}' already exists", )
        return ExerciseResponse.model_validate(exercise)

    def delete(self, user_id: str, exercise_id: str) -> None:
        exercise = self.repository.get_by_id(exercise_id)
        if not exercise or exercise.user_id != user_id:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Exercise not found")
        if exercise.is_base:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Base exercises cannot be deleted")
        self.repository.delete(exercise)
