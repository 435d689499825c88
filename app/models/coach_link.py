"""Coach/athlete link database model."""

import uuid
from datetime import datetime

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel


class CoachLink(SQLModel, table=True):
    """Grants a coach read access to an athlete's plans and the right to comment."""

    __tablename__ = "coach_links"
    __table_args__ = (UniqueConstraint("coach_id", "athlete_id", name="uq_coach_athlete"),)

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True, max_length=36)
    coach_id: str = Field(foreign_key="users.id", nullable=False, index=True, max_length=36)
    athlete_id: str = Field(foreign_key="users.id", nullable=False, index=True, max_length=36)

    created_at: datetime = Field(default_factory=datetime.utcnow)
