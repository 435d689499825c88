"""
Exercise database model.

Each user owns a catalogue of exercise names; the base lifts are
seeded automatically and flagged with ``is_base``.
"""

import uuid
from datetime import datetime

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel


class Exercise(SQLModel, table=True):
    __tablename__ = "exercises"
    __table_args__ = (UniqueConstraint("user_id", "name", name="uq_exercise_user_name"),)

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True, max_length=36)
    user_id: str = Field(foreign_key="users.id", nullable=False, index=True, max_length=36)
    name: str = Field(nullable=False, max_length=100)
    is_base: bool = Field(default=False, nullable=False)

    created_at: datetime = Field(default_factory=datetime.utcnow)
