"""
Training dashboard endpoint.
"""

from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.api.dependencies import get_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.dashboard import DashboardResponse
from app.services.dashboard_service import DashboardService

router = APIRouter()


@router.get("/dashboard", summary="Best base lifts and activity counters.", response_model=DashboardResponse, )
def get_dashboard(db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = DashboardService(db)
    return service.get(user.id)
