"""
User service.

Business logic for registration, authentication and session
management.

Sessions are refresh tokens.  Every refresh token is single-use: a
successful refresh deletes the presented token and issues a new pair.
After each issue the user's tokens beyond ``MAX_SESSIONS_PER_USER``
most recent ones are evicted.
"""

import logging
from datetime import datetime, timedelta
from typing import Optional

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from app.core.config import settings
from app.core.security import (create_access_token, generate_refresh_token, get_password_hash, hash_refresh_token,
                               verify_password, )
from app.db.repositories.coach_link import CoachLinkRepository
from app.db.repositories.exercise import ExerciseRepository
from app.db.repositories.plan import PlanRepository
from app.db.repositories.refresh_token import RefreshTokenRepository
from app.db.repositories.user import UserRepository
from app.db.repositories.user_follow import UserFollowRepository
from app.db.repositories.user_profile import UserProfileRepository
from app.db.repositories.workout import WorkoutRepository
from app.models.refresh_token import RefreshToken
from app.models.user import User
from app.schemas.token import AuthResponse, Token
from app.schemas.user import PasswordChange, UserCreate, UserLogin, UserResponse

logger = logging.getLogger(__name__)


def _invalid_refresh_token() -> HTTPException:
    return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid refresh token")


class UserService:
    """Service for user-related business logic."""

    def __init__(self, session: Session):
        """
        Initialize service with database session.

        Args:
            session: SQLModel database session
        """
        self.session = session
        self.repository = UserRepository(session)
        self.token_repository = RefreshTokenRepository(session)

    def register(self, user_data: UserCreate) -> AuthResponse:
        """
        Register a new user and open a first session.

        Args:
            user_data: User registration data

        Returns:
            Created user with an access/refresh token pair

        Raises:
            HTTPException 409: If email already exists
        """
        if self.repository.exists_by_email(user_data.email):
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="User already exists")

        user = User(email=user_data.email, hashed_password=get_password_hash(user_data.password))
        try:
            user = self.repository.create(user)
        except IntegrityError:
            # Lost a race against a concurrent registration with the same email
            self.session.rollback()
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="User already exists")

        logger.info("Registered user %s", user.id)
        return self._auth_response(user)

    def authenticate(self, login_data: UserLogin) -> AuthResponse:
        """
        Authenticate user and open a new session.

        Args:
            login_data: User login credentials

        Returns:
            The user with an access/refresh token pair

        Raises:
            HTTPException 401: If credentials are invalid
            HTTPException 403: If the account is inactive
        """
        user = self.repository.get_by_email(login_data.email)

        if not user or not verify_password(login_data.password, user.hashed_password):
            logger.warning("Failed login attempt for %s", login_data.email)
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials",
                                headers={"WWW-Authenticate": "Bearer"}, )

        if not user.is_active:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="User account is inactive")

        return self._auth_response(user)

    def refresh(self, refresh_token: str) -> Token:
        """
        Exchange a refresh token for a new token pair.

        The presented token is consumed whether or not the exchange succeeds.

        Raises:
            HTTPException 401: Unknown, expired or orphaned token
        """
        stored = self.token_repository.get_by_hash(hash_refresh_token(refresh_token))
        if stored is None:
            raise _invalid_refresh_token()

        user_id = stored.user_id
        expired = stored.expires_at <= datetime.utcnow()
        self.token_repository.delete(stored)

        if expired:
            logger.info("Rejected expired refresh token for user %s", user_id)
            raise _invalid_refresh_token()

        user = self.repository.get_by_id(user_id)
        if not user or not user.is_active:
            raise _invalid_refresh_token()

        logger.debug("Rotated refresh token for user %s", user.id)
        return self._issue_tokens(user)

    def logout(self, refresh_token: str) -> None:
        """Revoke a refresh token.  Unknown tokens are ignored."""
        stored = self.token_repository.get_by_hash(hash_refresh_token(refresh_token))
        if stored is not None:
            self.token_repository.delete(stored)

    def change_password(self, user: User, data: PasswordChange) -> None:
        """
        Replace the user's password and revoke every open session.

        Raises:
            HTTPException 401: If the current password does not match
        """
        if not verify_password(data.current_password, user.hashed_password):
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")

        user.hashed_password = get_password_hash(data.new_password)
        user.updated_at = datetime.utcnow()
        self.repository.update(user)
        revoked = self.token_repository.delete_all_for_user(user.id)
        logger.info("Password changed for user %s, %d session(s) revoked", user.id, revoked)

    def delete_account(self, user: User) -> None:
        """Delete the user and every row that references it, in one transaction."""
        user_id = user.id
        self.token_repository.delete_all_for_user(user_id, commit=False)
        UserFollowRepository(self.session).delete_all_for_user(user_id, commit=False)
        UserProfileRepository(self.session).delete_for_user(user_id, commit=False)
        CoachLinkRepository(self.session).delete_all_for_user(user_id, commit=False)
        PlanRepository(self.session).delete_all_for_user(user_id, commit=False)
        WorkoutRepository(self.session).delete_all_for_user(user_id, commit=False)
        ExerciseRepository(self.session).delete_all_for_user(user_id, commit=False)
        self.session.flush()
        self.repository.delete(user_id)
        logger.info("Deleted account %s", user_id)

    def get_user_by_id(self, user_id: str) -> Optional[User]:
        """
        Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User if found, None otherwise
        """
        return self.repository.get_by_id(user_id)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _auth_response(self, user: User) -> AuthResponse:
        tokens = self._issue_tokens(user)
        return AuthResponse(user=UserResponse.model_validate(user), **tokens.model_dump())

    def _issue_tokens(self, user: User) -> Token:
        access_token_expires = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
        access_token = create_access_token(data={"sub": user.id, "email": user.email},
                                           expires_delta=access_token_expires)

        refresh_token = generate_refresh_token()
        self.token_repository.create(RefreshToken(user_id=user.id, token_hash=hash_refresh_token(refresh_token),
                                                  expires_at=datetime.utcnow() + timedelta(
                                                      days=settings.REFRESH_TOKEN_EXPIRE_DAYS)))

        evicted = self.token_repository.evict_oldest(user.id, keep=settings.MAX_SESSIONS_PER_USER)
        if evicted:
            logger.info("Evicted %d old session(s) for user %s", evicted, user.id)

        return Token(access_token=access_token, refresh_token=refresh_token, token_type="bearer",
                     expires_in=int(access_token_expires.total_seconds()))
