"""
Shared API dependencies.

Reusable FastAPI dependencies for authentication and database access.
"""

from typing import Optional

from fastapi import Depends, HTTPException, status
from sqlmodel import Session

from app.core.security import decode_access_token, oauth2_scheme
from app.db.session import get_db
from app.models.user import User
from app.services.user_service import UserService


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail,
                         headers={"WWW-Authenticate": "Bearer"}, )


def get_current_user(token: Optional[str] = Depends(oauth2_scheme), db: Session = Depends(get_db), ) -> User:
    """Extract and validate the current user from the JWT access token."""
    if not token:
        raise _unauthorized("Unauthorized")
    payload = decode_access_token(token)
    if not payload:
        raise _unauthorized("Invalid token")
    user = UserService(db).get_user_by_id(payload["sub"])
    if not user or not user.is_active:
        raise _unauthorized("User not found")
    return user
