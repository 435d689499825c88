"""
Coach link repository.

Handles database operations for :class:`CoachLink`.
"""

from typing import Optional

from sqlalchemy import or_
from sqlmodel import Session, col, select

from app.models.coach_link import CoachLink
from app.models.user import User


class CoachLinkRepository:
    """Repository for coach/athlete links."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, link: CoachLink) -> CoachLink:
        self.session.add(link)
        self.session.commit()
        self.session.refresh(link)
        return link

    def get(self, coach_id: str, athlete_id: str) -> Optional[CoachLink]:
        statement = select(CoachLink).where(CoachLink.coach_id == coach_id, CoachLink.athlete_id == athlete_id)
        return self.session.exec(statement).first()

    def is_linked(self, coach_id: str, athlete_id: str) -> bool:
        return self.get(coach_id, athlete_id) is not None

    def list_athletes(self, coach_id: str) -> list[tuple[CoachLink, User]]:
        """Links of the coach joined with the athlete's user row, oldest link first."""
        statement = (select(CoachLink, User).join(User, col(User.id) == CoachLink.athlete_id)
                     .where(CoachLink.coach_id == coach_id).order_by(col(CoachLink.created_at).asc()))
        return [(link, user) for link, user in self.session.exec(statement).all()]

    def delete(self, link: CoachLink) -> None:
        self.session.delete(link)
        self.session.commit()

    def delete_all_for_user(self, user_id: str, commit: bool = True) -> None:
        """Drop links where the user is either the coach or the athlete."""
        statement = select(CoachLink).where(or_(CoachLink.coach_id == user_id, CoachLink.athlete_id == user_id))
        for link in self.session.exec(statement).all():
            self.session.delete(link)
        if commit:
            self.session.commit()
