"""
Training plan database models.

A plan carries its current title/content and a monotonically
increasing ``version``.  Every create/update also writes an immutable
:class:`PlanVersion` snapshot.  Coaches linked to the plan owner can
attach :class:`PlanComment` rows.
"""

import uuid
from datetime import datetime
from enum import Enum

from sqlalchemy import Column, Text, UniqueConstraint
from sqlmodel import Field, SQLModel


class PlanStatus(str, Enum):
    DRAFT = "draft"
    ACTIVE = "active"
    ARCHIVED = "archived"


class Plan(SQLModel, table=True):
    """Current state of a training plan."""

    __tablename__ = "plans"

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True, max_length=36)
    user_id: str = Field(foreign_key="users.id", nullable=False, index=True, max_length=36)
    title: str = Field(nullable=False, max_length=200)
    content: str = Field(sa_column=Column(Text, nullable=False))
    status: str = Field(default=PlanStatus.DRAFT.value, nullable=False, max_length=20)
    version: int = Field(default=1, nullable=False)

    # Timestamps
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow, index=True)


class PlanVersion(SQLModel, table=True):
    """Snapshot of a plan's title and content at a given version."""

    __tablename__ = "plan_versions"
    __table_args__ = (UniqueConstraint("plan_id", "version", name="uq_plan_version"),)

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True, max_length=36)
    plan_id: str = Field(foreign_key="plans.id", nullable=False, index=True, max_length=36)
    version: int = Field(nullable=False)
    title: str = Field(nullable=False, max_length=200)
    content: str = Field(sa_column=Column(Text, nullable=False))

    created_at: datetime = Field(default_factory=datetime.utcnow)


class PlanComment(SQLModel, table=True):
    """A coach's comment on one of an athlete's plans."""

    __tablename__ = "plan_comments"

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True, max_length=36)
    plan_id: str = Field(foreign_key="plans.id", nullable=False, index=True, max_length=36)
    coach_id: str = Field(foreign_key="users.id", nullable=False, index=True, max_length=36)
    athlete_id: str = Field(foreign_key="users.id", nullable=False, max_length=36)
    comment: str = Field(sa_column=Column(Text, nullable=False))

    created_at: datetime = Field(default_factory=datetime.utcnow)
