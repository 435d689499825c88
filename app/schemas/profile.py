"""
Profile and social API schemas.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ProfileUpdate(BaseModel):
    """Schema for saving the current user's profile."""

    first_name: str = Field("", max_length=255)
    last_name: str = Field("", max_length=255)
    contacts: str = Field("", max_length=255)
    city: str = Field("", max_length=255)
    weight_category: str = Field("", max_length=255, description="Competition weight class, e.g. '93 kg'")
    current_weight: float = Field(0.0, ge=0, description="Body weight in kilograms")
    bio: Optional[str] = Field("", max_length=1000)

    model_config = ConfigDict(str_strip_whitespace=True)


class ProfileResponse(BaseModel):
    """Profile with follower counters."""

    user_id: str
    email: str
    first_name: str
    last_name: str
    contacts: str
    city: str
    weight_category: str
    current_weight: float
    bio: Optional[str]
    followers: int
    following: int


class PublicProfileResponse(ProfileResponse):
    """Another user's profile as seen by the caller."""

    is_following: bool


class UserSummary(BaseModel):
    """Compact user card used in lists."""

    id: str
    email: str
    first_name: str = ""
    last_name: str = ""
    city: str = ""


class UserSearchResult(UserSummary):
    is_following: bool
