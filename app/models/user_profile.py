"""
User profile database model.

Public-facing profile details, one row per user, created lazily on
the first save.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Field, SQLModel


class UserProfile(SQLModel, table=True):
    __tablename__ = "user_profiles"

    user_id: str = Field(foreign_key="users.id", primary_key=True, max_length=36)
    first_name: str = Field(default="", max_length=255)
    last_name: str = Field(default="", max_length=255)
    contacts: str = Field(default="", max_length=255)
    city: str = Field(default="", max_length=255)
    weight_category: str = Field(default="", max_length=255)
    current_weight: float = Field(default=0.0)
    bio: Optional[str] = Field(default="", max_length=1000)

    updated_at: datetime = Field(default_factory=datetime.utcnow)
