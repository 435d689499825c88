"""
User API schemas.

Pydantic models for user-related request/response validation.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


def _normalise_email(value: Any) -> Any:
    if isinstance(value, str):
        return value.strip().lower()
    return value


# Request schemas
class UserCreate(BaseModel):
    """Schema for user registration."""
    email: EmailStr
    password: str = Field(..., min_length=8, description="Password (min 8 characters)")

    @field_validator("email", mode="before")
    @classmethod
    def normalise_email(cls, value: Any) -> Any:
        return _normalise_email(value)


class UserLogin(BaseModel):
    """Schema for user login."""
    email: EmailStr
    password: str = Field(..., min_length=1)

    @field_validator("email", mode="before")
    @classmethod
    def normalise_email(cls, value: Any) -> Any:
        return _normalise_email(value)


class PasswordChange(BaseModel):
    """Schema for changing the account password."""
    current_password: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=8, description="New password (min 8 characters)")


# Response schemas
class UserResponse(BaseModel):
    """Schema for user data in API responses (no sensitive data)."""
    id: str
    email: str
    is_active: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class MeResponse(BaseModel):
    """Schema for the current-user endpoint."""
    user: UserResponse
