"""
Training plan API schemas.

Create and update share the same body: an update replaces title,
content and status and produces a new version.
"""

import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.models.plan import PlanStatus


class PlanBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    content: str = Field(..., min_length=1, description="Free-form plan body")
    status: PlanStatus = Field(PlanStatus.DRAFT, description="draft, active or archived")

    model_config = ConfigDict(str_strip_whitespace=True)


class PlanCreate(PlanBase):
    """Schema for creating a plan (version 1)."""


class PlanUpdate(PlanBase):
    """Schema for replacing a plan's content (bumps the version)."""


class PlanResponse(BaseModel):
    """Schema for plan in API responses."""

    id: str
    user_id: str
    title: str
    content: str
    status: PlanStatus
    version: int
    created_at: datetime.datetime
    updated_at: datetime.datetime

    model_config = ConfigDict(from_attributes=True)


class PlanVersionResponse(BaseModel):
    """Schema for one entry of a plan's history."""

    id: str
    plan_id: str
    version: int
    title: str
    content: str
    created_at: datetime.datetime

    model_config = ConfigDict(from_attributes=True)


class PlanCommentCreate(BaseModel):
    """Schema for a coach commenting on an athlete's plan."""

    athlete_id: str = Field(..., min_length=1)
    plan_id: str = Field(..., min_length=1)
    comment: str = Field(..., min_length=1, max_length=2000)

    model_config = ConfigDict(str_strip_whitespace=True)


class PlanCommentResponse(BaseModel):
    id: str
    plan_id: str
    coach_id: str
    athlete_id: str
    comment: str
    created_at: datetime.datetime

    model_config = ConfigDict(from_attributes=True)
