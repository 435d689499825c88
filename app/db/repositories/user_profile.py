"""
User profile repository.

Handles database operations for :class:`UserProfile`.
"""

from typing import Optional

from sqlmodel import Session

from app.models.user_profile import UserProfile


class UserProfileRepository:
    """Repository for UserProfile database operations."""

    def __init__(self, session: Session):
        self.session = session

    def get(self, user_id: str) -> Optional[UserProfile]:
        return self.session.get(UserProfile, user_id)

    def save(self, profile: UserProfile) -> UserProfile:
        """Insert or update the profile row."""
        self.session.add(profile)
        self.session.commit()
        self.session.refresh(profile)
        return profile

    def delete_for_user(self, user_id: str, commit: bool = True) -> None:
        profile = self.get(user_id)
        if profile:
            self.session.delete(profile)
        if commit:
            self.session.commit()
