"""
Exercise repository.

Handles database operations for :class:`Exercise`.
"""

from typing import Optional

from sqlalchemy import func
from sqlmodel import Session, col, select

from app.models.exercise import Exercise


class ExerciseRepository:
    """Repository for Exercise database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, exercise: Exercise) -> Exercise:
        self.session.add(exercise)
        self.session.commit()
        self.session.refresh(exercise)
        return exercise

    def create_many(self, exercises: list[Exercise]) -> None:
        self.session.add_all(exercises)
        self.session.commit()

    def get_by_id(self, exercise_id: str) -> Optional[Exercise]:
        return self.session.get(Exercise, exercise_id)

    def get_by_user_and_name(self, user_id: str, name: str) -> Optional[Exercise]:
        statement = select(Exercise).where(Exercise.user_id == user_id, Exercise.name == name)
        return self.session.exec(statement).first()

    def list_for_user(self, user_id: str) -> list[Exercise]:
        """Base lifts first, then alphabetical."""
        statement = (select(Exercise).where(Exercise.user_id == user_id)
                     .order_by(col(Exercise.is_base).desc(), col(Exercise.name).asc()))
        return list(self.session.exec(statement).all())

    def count_for_user(self, user_id: str) -> int:
        statement = select(func.count()).select_from(Exercise).where(Exercise.user_id == user_id)
        return self.session.exec(statement).first() or 0

    def delete(self, exercise: Exercise) -> None:
        self.session.delete(exercise)
        self.session.commit()

    def delete_all_for_user(self, user_id: str, commit: bool = True) -> None:
        for exercise in self.session.exec(select(Exercise).where(Exercise.user_id == user_id)).all():
            self.session.delete(exercise)
        if commit:
            self.session.commit()
