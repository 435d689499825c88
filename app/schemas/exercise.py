"""
Exercise API schemas.
"""

from pydantic import BaseModel, ConfigDict, Field


class ExerciseCreate(BaseModel):
    """Schema for adding a custom exercise."""

    name: str = Field(..., min_length=1, max_length=100, description="Exercise name, e.g. 'Front squat'")

    model_config = ConfigDict(str_strip_whitespace=True)


class ExerciseResponse(BaseModel):
    """Schema for exercise in API responses."""

    id: str
    name: str
    is_base: bool

    model_config = ConfigDict(from_attributes=True)
