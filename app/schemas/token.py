"""
Token API schemas.

Access/refresh token pairs returned by login, registration and refresh.
"""

from pydantic import BaseModel, Field

from app.schemas.user import UserResponse


class Token(BaseModel):
    """Schema for a JWT access token plus its rotating refresh token."""
    access_token: str
    refresh_token: str
    token_type: str = "bearer"
    expires_in: int = Field(..., description="Access token lifetime in seconds")


class AuthResponse(Token):
    """Token pair together with the authenticated user."""
    user: UserResponse


class RefreshRequest(BaseModel):
    """Schema for refresh and logout requests."""
    refresh_token: str = Field(..., min_length=1)
