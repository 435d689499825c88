"""
Training plan repository.

Handles database operations for :class:`Plan` together with its
version history and coach comments.  A plan and its version snapshot
are written in the same commit.
"""

from typing import Optional

from sqlalchemy import func, or_
from sqlmodel import Session, col, select

from app.models.plan import Plan, PlanComment, PlanVersion


class PlanRepository:
    """Repository for Plan, PlanVersion and PlanComment operations."""

    def __init__(self, session: Session):
        self.session = session

    # ------------------------------------------------------------------
    # Plans
    # ------------------------------------------------------------------

    def create(self, plan: Plan, version: PlanVersion) -> Plan:
        self.session.add(plan)
        self.session.add(version)
        self.session.commit()
        self.session.refresh(plan)
        return plan

    def get_by_id(self, plan_id: str) -> Optional[Plan]:
        return self.session.get(Plan, plan_id)

    def get_owned(self, user_id: str, plan_id: str) -> Optional[Plan]:
        statement = select(Plan).where(Plan.id == plan_id, Plan.user_id == user_id)
        return self.session.exec(statement).first()

    def list_for_user(self, user_id: str) -> list[Plan]:
        statement = select(Plan).where(Plan.user_id == user_id).order_by(col(Plan.updated_at).desc())
        return list(self.session.exec(statement).all())

    def count_for_user(self, user_id: str) -> int:
        statement = select(func.count()).select_from(Plan).where(Plan.user_id == user_id)
        return self.session.exec(statement).first() or 0

    def update(self, plan: Plan, version: PlanVersion) -> Plan:
        self.session.add(plan)
        self.session.add(version)
        self.session.commit()
        self.session.refresh(plan)
        return plan

    def delete(self, plan: Plan, commit: bool = True) -> None:
        """Delete a plan with its versions and comments."""
        for comment in self.list_comments(plan.id):
            self.session.delete(comment)
        for version in self.list_versions(plan.id):
            self.session.delete(version)
        # Children have to be gone before the parent row when foreign keys are enforced
        self.session.flush()
        self.session.delete(plan)
        if commit:
            self.session.commit()

    def delete_all_for_user(self, user_id: str, commit: bool = True) -> None:
        """Remove the user's plans and every comment the user wrote as a coach."""
        authored = select(PlanComment).where(or_(PlanComment.coach_id == user_id, PlanComment.athlete_id == user_id))
        for comment in self.session.exec(authored).all():
            self.session.delete(comment)
        self.session.flush()
        for plan in self.list_for_user(user_id):
            self.delete(plan, commit=False)
        if commit:
            self.session.commit()

    # ------------------------------------------------------------------
    # Versions
    # ------------------------------------------------------------------

    def list_versions(self, plan_id: str) -> list[PlanVersion]:
        statement = (select(PlanVersion).where(PlanVersion.plan_id == plan_id)
                     .order_by(col(PlanVersion.version).asc()))
        return list(self.session.exec(statement).all())

    # ------------------------------------------------------------------
    # Comments
    # ------------------------------------------------------------------

    def add_comment(self, comment: PlanComment) -> PlanComment:
        self.session.add(comment)
        self.session.commit()
        self.session.refresh(comment)
        return comment

    def list_comments(self, plan_id: str) -> list[PlanComment]:
        statement = (select(PlanComment).where(PlanComment.plan_id == plan_id)
                     .order_by(col(PlanComment.created_at).asc()))
        return list(self.session.exec(statement).all())
