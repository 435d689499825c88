"""
Follow relationship repository.

Handles database operations for :class:`UserFollow`.
"""

from typing import Optional

from sqlalchemy import func, or_
from sqlmodel import Session, col, select

from app.models.user import User
from app.models.user_follow import UserFollow


class UserFollowRepository:
    """Repository for follower/followee rows."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, follow: UserFollow) -> UserFollow:
        self.session.add(follow)
        self.session.commit()
        self.session.refresh(follow)
        return follow

    def get(self, follower_id: str, followee_id: str) -> Optional[UserFollow]:
        statement = select(UserFollow).where(UserFollow.follower_id == follower_id,
                                             UserFollow.followee_id == followee_id)
        return self.session.exec(statement).first()

    def delete(self, follow: UserFollow) -> None:
        self.session.delete(follow)
        self.session.commit()

    def list_followers(self, user_id: str) -> list[User]:
        """Users following ``user_id``, most recent first."""
        statement = (select(User).join(UserFollow, col(UserFollow.follower_id) == User.id)
                     .where(UserFollow.followee_id == user_id).order_by(col(UserFollow.created_at).desc()))
        return list(self.session.exec(statement).all())

    def list_following(self, user_id: str) -> list[User]:
        """Users ``user_id`` follows, most recent first."""
        statement = (select(User).join(UserFollow, col(UserFollow.followee_id) == User.id)
                     .where(UserFollow.follower_id == user_id).order_by(col(UserFollow.created_at).desc()))
        return list(self.session.exec(statement).all())

    def count_followers(self, user_id: str) -> int:
        statement = select(func.count()).select_from(UserFollow).where(UserFollow.followee_id == user_id)
        return self.session.exec(statement).first() or 0

    def count_following(self, user_id: str) -> int:
        statement = select(func.count()).select_from(UserFollow).where(UserFollow.follower_id == user_id)
        return self.session.exec(statement).first() or 0

    def followed_among(self, follower_id: str, candidate_ids: list[str]) -> set[str]:
        """Subset of ``candidate_ids`` that ``follower_id`` already follows."""
        if not candidate_ids:
            return set()
        statement = select(UserFollow.followee_id).where(UserFollow.follower_id == follower_id,
                                                         col(UserFollow.followee_id).in_(candidate_ids))
        return set(self.session.exec(statement).all())

    def delete_all_for_user(self, user_id: str, commit: bool = True) -> None:
        statement = select(UserFollow).where(or_(UserFollow.follower_id == user_id,
                                                 UserFollow.followee_id == user_id))
        for follow in self.session.exec(statement).all():
            self.session.delete(follow)
        if commit:
            self.session.commit()
