"""
Refresh token database model.

One row per live session.  Only the SHA-256 digest of the token is stored.
"""

import uuid
from datetime import datetime

from sqlmodel import Field, SQLModel


class RefreshToken(SQLModel, table=True):
    """A single-use refresh token belonging to a user."""

    __tablename__ = "refresh_tokens"

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True, max_length=36)
    user_id: str = Field(foreign_key="users.id", nullable=False, index=True, max_length=36)
    token_hash: str = Field(unique=True, index=True, max_length=64, nullable=False)

    created_at: datetime = Field(default_factory=datetime.utcnow, index=True)
    expires_at: datetime = Field(nullable=False)
