"""
Coach endpoints.

Link athletes, browse their plans and comment on them.
"""

from fastapi import APIRouter, Depends, Response, status
from sqlmodel import Session

from app.api.dependencies import get_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.coach import AthleteLinkCreate, AthleteResponse, CoachLinkResponse
from app.schemas.plan import PlanCommentCreate, PlanCommentResponse, PlanResponse
from app.services.coach_service import CoachService

router = APIRouter()


@router.post("/athletes", summary="Link an athlete to the current coach.", response_model=CoachLinkResponse,
             status_code=status.HTTP_201_CREATED, )
def add_athlete(data: AthleteLinkCreate, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = CoachService(db)
    return service.add_athlete(user.id, data.athlete_id)


@router.get("/athletes", summary="List linked athletes.", response_model=list[AthleteResponse], )
def list_athletes(db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = CoachService(db)
    return service.list_athletes(user.id)


@router.delete("/athletes/{athlete_id}", summary="Unlink an athlete.", status_code=status.HTTP_204_NO_CONTENT, )
def remove_athlete(athlete_id: str, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = CoachService(db)
    service.remove_athlete(user.id, athlete_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/athletes/{athlete_id}/plans", summary="Plans of a linked athlete.",
            response_model=list[PlanResponse], )
def list_athlete_plans(athlete_id: str, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = CoachService(db)
    return service.athlete_plans(user.id, athlete_id)


@router.post("/comments", summary="Comment on a linked athlete's plan.", response_model=PlanCommentResponse,
             status_code=status.HTTP_201_CREATED, )
def add_comment(data: PlanCommentCreate, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = CoachService(db)
    return service.add_comment(user.id, data)
