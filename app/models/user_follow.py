"""Social follow relationship database model."""

import uuid
from datetime import datetime

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel


class UserFollow(SQLModel, table=True):
    """``follower_id`` follows ``followee_id``."""

    __tablename__ = "user_follows"
    __table_args__ = (UniqueConstraint("follower_id", "followee_id", name="uq_follower_followee"),)

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True, max_length=36)
    follower_id: str = Field(foreign_key="users.id", nullable=False, index=True, max_length=36)
    followee_id: str = Field(foreign_key="users.id", nullable=False, index=True, max_length=36)

    created_at: datetime = Field(default_factory=datetime.utcnow)
