"""
Training plan service.

Plans are versioned: creation writes version 1, every update bumps the
version by one and records a snapshot of the new title and content.
Comments on a plan are visible to its owner and to coaches linked to
the owner.
"""

import datetime

from fastapi import HTTPException, status
from sqlmodel import Session

from app.db.repositories.coach_link import CoachLinkRepository
from app.db.repositories.plan import PlanRepository
from app.models.plan import Plan, PlanVersion
from app.schemas.plan import (PlanCommentResponse, PlanCreate, PlanResponse, PlanUpdate, PlanVersionResponse, )


class PlanService:
    """Service for training plan business logic."""

    def __init__(self, session: Session):
        self.repository = PlanRepository(session)
        self.coach_links = CoachLinkRepository(session)

    def list_for_user(self, user_id: str) -> list[PlanResponse]:
        return [PlanResponse.model_validate(p) for p in self.repository.list_for_user(user_id)]

    def get(self, user_id: str, plan_id: str) -> PlanResponse:
        return PlanResponse.model_validate(self._get_owned_plan(user_id, plan_id))

    def create(self, user_id: str, data: PlanCreate) -> PlanResponse:
        now = datetime.datetime.utcnow()
        plan = Plan(user_id=user_id, title=data.title, content=data.content, status=data.status.value, version=1,
                    created_at=now, updated_at=now, )
        snapshot = PlanVersion(plan_id=plan.id, version=1, title=plan.title, content=plan.content, created_at=now)
        plan = self.repository.create(plan, snapshot)
        return PlanResponse.model_validate(plan)

    def update(self, user_id: str, plan_id: str, data: PlanUpdate) -> PlanResponse:
        plan = self._get_owned_plan(user_id, plan_id)
        now = datetime.datetime.utcnow()

        plan.title = data.title
        plan.content = data.content
        plan.status = data.status.value
        plan.version += 1
        plan.updated_at = now

        snapshot = PlanVersion(plan_id=plan.id, version=plan.version, title=plan.title, content=plan.content,
                               created_at=now)
        plan = self.repository.update(plan, snapshot)
        return PlanResponse.model_validate(plan)

    def delete(self, user_id: str, plan_id: str) -> None:
        plan = self._get_owned_plan(user_id, plan_id)
        self.repository.delete(plan)

    def versions(self, user_id: str, plan_id: str) -> list[PlanVersionResponse]:
        plan = self._get_owned_plan(user_id, plan_id)
        return [PlanVersionResponse.model_validate(v) for v in self.repository.list_versions(plan.id)]

    def comments(self, user_id: str, plan_id: str) -> list[PlanCommentResponse]:
        """Comments on a plan, for its owner or a coach linked to the owner."""
        plan = self.repository.get_by_id(plan_id)
        if not plan:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Plan not found")
        if plan.user_id != user_id and not self.coach_links.is_linked(user_id, plan.user_id):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Plan not found")
        return [PlanCommentResponse.model_validate(c) for c in self.repository.list_comments(plan.id)]

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_owned_plan(self, user_id: str, plan_id: str) -> Plan:
        plan = self.repository.get_owned(user_id, plan_id)
        if not plan:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Plan not found")
        return plan
