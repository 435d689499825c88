"""
Coach service.

A coach links athletes by user id.  A link lets the coach read the
athlete's plans and comment on them.  Linking is idempotent.
"""

import logging

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from app.db.repositories.coach_link import CoachLinkRepository
from app.db.repositories.plan import PlanRepository
from app.db.repositories.user import UserRepository
from app.models.coach_link import CoachLink
from app.models.plan import PlanComment
from app.schemas.coach import AthleteResponse, CoachLinkResponse
from app.schemas.plan import PlanCommentCreate, PlanCommentResponse, PlanResponse

logger = logging.getLogger(__name__)


class CoachService:
    """Service for coach/athlete relationships and plan comments."""

    def __init__(self, session: Session):
        self.session = session
        self.links = CoachLinkRepository(session)
        self.users = UserRepository(session)
        self.plans = PlanRepository(session)

    def add_athlete(self, coach_id: str, athlete_id: str) -> CoachLinkResponse:
        if athlete_id == coach_id:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Cannot coach yourself")
        if not self.users.get_by_id(athlete_id):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Athlete not found")

        link = self.links.get(coach_id, athlete_id)
        if link is None:
            try:
                link = self.links.create(CoachLink(coach_id=coach_id, athlete_id=athlete_id))
                logger.info("Coach %s linked athlete %s", coach_id, athlete_id)
            except IntegrityError:
                # Concurrent request created the same link
                self.session.rollback()
                link = self.links.get(coach_id, athlete_id)
        return CoachLinkResponse.model_validate(link)

    def list_athletes(self, coach_id: str) -> list[AthleteResponse]:
        return [AthleteResponse(id=user.id, email=user.email, linked_at=link.created_at)
                for link, user in self.links.list_athletes(coach_id)]

    def remove_athlete(self, coach_id: str, athlete_id: str) -> None:
        link = self.links.get(coach_id, athlete_id)
        if not link:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Athlete not linked")
        self.links.delete(link)

    def athlete_plans(self, coach_id: str, athlete_id: str) -> list[PlanResponse]:
        self._require_link(coach_id, athlete_id)
        return [PlanResponse.model_validate(p) for p in self.plans.list_for_user(athlete_id)]

    def add_comment(self, coach_id: str, data: PlanCommentCreate) -> PlanCommentResponse:
        """
        Comment on an athlete's plan.

        Raises:
            HTTPException 403: The coach is not linked to the athlete
            HTTPException 404: The plan does not exist or belongs to someone else
        """
        self._require_link(coach_id, data.athlete_id)

        plan = self.plans.get_owned(data.athlete_id, data.plan_id)
        if not plan:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Plan not found")

        comment = self.plans.add_comment(
            PlanComment(plan_id=plan.id, coach_id=coach_id, athlete_id=data.athlete_id, comment=data.comment))
        return PlanCommentResponse.model_validate(comment)

    def _require_link(self, coach_id: str, athlete_id: str) -> None:
        if not self.links.is_linked(coach_id, athlete_id):
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Athlete is not linked to this coach")
