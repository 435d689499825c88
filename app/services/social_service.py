"""
Profile and social graph service.

Profiles are created lazily: a user who never saved one is presented
with empty fields.  Follow and unfollow are idempotent.
"""

import datetime
from typing import Optional

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from app.db.repositories.user import UserRepository
from app.db.repositories.user_follow import UserFollowRepository
from app.db.repositories.user_profile import UserProfileRepository
from app.models.user import User
from app.models.user_follow import UserFollow
from app.models.user_profile import UserProfile
from app.schemas.profile import (ProfileResponse, ProfileUpdate, PublicProfileResponse, UserSearchResult,
                                 UserSummary, )


class SocialService:
    """Service for profiles, follows and user search."""

    def __init__(self, session: Session):
        self.session = session
        self.users = UserRepository(session)
        self.profiles = UserProfileRepository(session)
        self.follows = UserFollowRepository(session)

    # ------------------------------------------------------------------
    # Profiles
    # ------------------------------------------------------------------

    def get_profile(self, user: User) -> ProfileResponse:
        return self._profile_response(user, self.profiles.get(user.id))

    def update_profile(self, user: User, data: ProfileUpdate) -> ProfileResponse:
        profile = self.profiles.get(user.id) or UserProfile(user_id=user.id)
        for field, value in data.model_dump().items():
            setattr(profile, field, value)
        profile.updated_at = datetime.datetime.utcnow()
        profile = self.profiles.save(profile)
        return self._profile_response(user, profile)

    def get_public_profile(self, viewer_id: str, user_id: str) -> PublicProfileResponse:
        user = self._get_user_or_404(user_id)
        base = self._profile_response(user, self.profiles.get(user.id))
        return PublicProfileResponse(**base.model_dump(),
                                     is_following=self.follows.get(viewer_id, user.id) is not None)

    # ------------------------------------------------------------------
    # Follows
    # ------------------------------------------------------------------

    def follow(self, follower_id: str, followee_id: str) -> None:
        if follower_id == followee_id:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Cannot follow yourself")
        self._get_user_or_404(followee_id)

        if self.follows.get(follower_id, followee_id):
            return
        try:
            self.follows.create(UserFollow(follower_id=follower_id, followee_id=followee_id))
        except IntegrityError:
            self.session.rollback()

    def unfollow(self, follower_id: str, followee_id: str) -> None:
        follow = self.follows.get(follower_id, followee_id)
        if follow:
            self.follows.delete(follow)

    def followers(self, user_id: str) -> list[UserSummary]:
        return self._summaries(self.follows.list_followers(user_id))

    def following(self, user_id: str) -> list[UserSummary]:
        return self._summaries(self.follows.list_following(user_id))

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def search(self, viewer_id: str, term: str, limit: int = 20) -> list[UserSearchResult]:
        term = term.strip()
        if not term:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Search query must not be blank")
        rows = self.users.search(term, exclude_id=viewer_id, limit=limit)
        followed = self.follows.followed_among(viewer_id, [user.id for user, _ in rows])
        return [UserSearchResult(**self._summary(user, profile).model_dump(), is_following=user.id in followed)
                for user, profile in rows]

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_user_or_404(self, user_id: str) -> User:
        user = self.users.get_by_id(user_id)
        if not user or not user.is_active:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
        return user

    def _profile_response(self, user: User, profile: Optional[UserProfile]) -> ProfileResponse:
        profile = profile or UserProfile(user_id=user.id)
        return ProfileResponse(user_id=user.id, email=user.email, first_name=profile.first_name,
                               last_name=profile.last_name, contacts=profile.contacts, city=profile.city,
                               weight_category=profile.weight_category, current_weight=profile.current_weight,
                               bio=profile.bio, followers=self.follows.count_followers(user.id),
                               following=self.follows.count_following(user.id), )

    def _summaries(self, users: list[User]) -> list[UserSummary]:
        return [self._summary(user, self.profiles.get(user.id)) for user in users]

    @staticmethod
    def _summary(user: User, profile: Optional[UserProfile]) -> UserSummary:
        if profile is None:
            return UserSummary(id=user.id, email=user.email)
        return UserSummary(id=user.id, email=user.email, first_name=profile.first_name,
                           last_name=profile.last_name, city=profile.city)
