"""
User repository.

Handles database operations for User model.
"""

from typing import Optional

from sqlalchemy import or_
from sqlmodel import Session, col, select

from app.models.user import User
from app.models.user_profile import UserProfile


def _like_pattern(term: str) -> str:
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class UserRepository:
    """Repository for User database operations."""

    def __init__(self, session: Session):
        """
        Initialize repository with database session.

        Args:
            session: SQLModel database session
        """
        self.session = session

    def create(self, user: User) -> User:
        """
        Create a new user in the database.

        Args:
            user: User instance to create

        Returns:
            Created user with generated id
        """
        self.session.add(user)
        self.session.commit()
        self.session.refresh(user)
        return user

    def get_by_id(self, user_id: str) -> Optional[User]:
        """
        Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User instance if found, None otherwise
        """
        return self.session.get(User, user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        """
        Get user by email address.

        Args:
            email: Normalised user email

        Returns:
            User instance if found, None otherwise
        """
        statement = select(User).where(User.email == email)
        return self.session.exec(statement).first()

    def search(self, term: str, exclude_id: str, limit: int = 20) -> list[tuple[User, Optional[UserProfile]]]:
        """
        Case-insensitive substring search on email and profile names.

        Args:
            term: Text to look for
            exclude_id: User to leave out of the results (the caller)
            limit: Maximum number of rows

        Returns:
            (user, profile) pairs ordered by email; profile is None when never saved
        """
        pattern = _like_pattern(term)
        statement = (select(User, UserProfile).join(UserProfile, col(UserProfile.user_id) == User.id, isouter=True)
                     .where(User.id != exclude_id, User.is_active == True)  # noqa: E712
                     .where(or_(col(User.email).ilike(pattern, escape="\\"),
                                col(UserProfile.first_name).ilike(pattern, escape="\\"),
                                col(UserProfile.last_name).ilike(pattern, escape="\\"), ))
                     .order_by(User.email).limit(limit))
        return [(user, profile) for user, profile in self.session.exec(statement).all()]

    def update(self, user: User) -> User:
        """
        Update an existing user.

        Args:
            user: User instance with updated data

        Returns:
            Updated user
        """
        self.session.add(user)
        self.session.commit()
        self.session.refresh(user)
        return user

    def delete(self, user_id: str) -> bool:
        """
        Delete a user by ID.

        Rows referencing the user must be removed first.

        Args:
            user_id: User ID to delete

        Returns:
            True if deleted, False if not found
        """
        user = self.get_by_id(user_id)
        if user:
            self.session.delete(user)
            self.session.commit()
            return True
        return False

    def exists_by_email(self, email: str) -> bool:
        """
        Check if a user with the given email exists.

        Args:
            email: Email to check

        Returns:
            True if user exists, False otherwise
        """
        return self.get_by_email(email) is not None
