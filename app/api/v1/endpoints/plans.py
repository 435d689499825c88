"""
Training plan endpoints.

CRUD for versioned plans, plus their history and coach comments.
"""

from fastapi import APIRouter, Depends, Response, status
from sqlmodel import Session

from app.api.dependencies import get_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.plan import (PlanCommentResponse, PlanCreate, PlanResponse, PlanUpdate, PlanVersionResponse, )
from app.services.plan_service import PlanService

router = APIRouter()


@router.get("", summary="List plans, most recently updated first.", response_model=list[PlanResponse], )
def list_plans(db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = PlanService(db)
    return service.list_for_user(user.id)


@router.post("", summary="Create a plan.", response_model=PlanResponse, status_code=status.HTTP_201_CREATED, )
def create_plan(data: PlanCreate, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = PlanService(db)
    return service.create(user.id, data)


@router.get("/{plan_id}", summary="Get a plan.", response_model=PlanResponse, )
def get_plan(plan_id: str, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = PlanService(db)
    return service.get(user.id, plan_id)


@router.put("/{plan_id}", summary="Replace a plan and bump its version.", response_model=PlanResponse, )
def update_plan(plan_id: str, data: PlanUpdate, db: Session = Depends(get_db),
                user: User = Depends(get_current_user), ):
    service = PlanService(db)
    return service.update(user.id, plan_id, data)


@router.delete("/{plan_id}", summary="Delete a plan with its history.", status_code=status.HTTP_204_NO_CONTENT, )
def delete_plan(plan_id: str, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = PlanService(db)
    service.delete(user.id, plan_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{plan_id}/versions", summary="Version history of a plan.", response_model=list[PlanVersionResponse], )
def list_plan_versions(plan_id: str, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = PlanService(db)
    return service.versions(user.id, plan_id)


@router.get("/{plan_id}/comments", summary="Coach comments on a plan.", response_model=list[PlanCommentResponse], )
def list_plan_comments(plan_id: str, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = PlanService(db)
    return service.comments(user.id, plan_id)
