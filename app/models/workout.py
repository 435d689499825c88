"""
Workout database model.

A workout is one logged set: exercise name, reps and weight.  The
exercise is stored by name so that logs survive exercise deletion.
"""

import uuid
from datetime import datetime
from typing import Optional

from sqlmodel import Field, SQLModel


class Workout(SQLModel, table=True):
    __tablename__ = "workouts"

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True, max_length=36)
    user_id: str = Field(foreign_key="users.id", nullable=False, index=True, max_length=36)
    exercise: str = Field(nullable=False, max_length=100, index=True)
    reps: int = Field(nullable=False)
    weight: float = Field(nullable=False)
    notes: Optional[str] = Field(default="", max_length=1000)
    performed_at: datetime = Field(default_factory=datetime.utcnow, index=True)

    # Timestamps
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)
