"""
Workout API schemas.

``performed_at`` defaults to the current time when omitted, both on
create and on update.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class WorkoutBase(BaseModel):
    exercise: str = Field(..., min_length=1, max_length=100, description="Exercise name")
    reps: int = Field(..., gt=0, description="Repetitions performed")
    weight: float = Field(..., ge=0, description="Load in kilograms")
    notes: Optional[str] = Field(None, max_length=1000)
    performed_at: Optional[datetime.datetime] = Field(None, description="When the set was performed (defaults to now)")

    model_config = ConfigDict(str_strip_whitespace=True)


class WorkoutCreate(WorkoutBase):
    """Schema for logging a workout."""


class WorkoutUpdate(WorkoutBase):
    """Schema for replacing a logged workout."""


class WorkoutResponse(BaseModel):
    """Schema for workout in API responses."""

    id: str
    user_id: str
    exercise: str
    reps: int
    weight: float
    notes: Optional[str]
    performed_at: datetime.datetime
    created_at: datetime.datetime
    updated_at: datetime.datetime

    model_config = ConfigDict(from_attributes=True)
