"""
Coach API schemas.
"""

import datetime

from pydantic import BaseModel, ConfigDict, Field


class AthleteLinkCreate(BaseModel):
    """Schema for linking an athlete to the current coach."""

    athlete_id: str = Field(..., min_length=1)


class CoachLinkResponse(BaseModel):
    id: str
    coach_id: str
    athlete_id: str
    created_at: datetime.datetime

    model_config = ConfigDict(from_attributes=True)


class AthleteResponse(BaseModel):
    """A linked athlete as seen by the coach."""

    id: str
    email: str
    linked_at: datetime.datetime
