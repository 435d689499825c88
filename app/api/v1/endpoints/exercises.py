"""
Exercise endpoints.
"""

from fastapi import APIRouter, Depends, Response, status
from sqlmodel import Session

from app.api.dependencies import get_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.exercise import ExerciseCreate, ExerciseResponse
from app.services.exercise_service import ExerciseService

router = APIRouter()


@router.get("", summary="List exercises (base lifts first).", response_model=list[ExerciseResponse], )
def list_exercises(db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = ExerciseService(db)
    return service.list_for_user(user.id)


@router.post("", summary="Add a custom exercise.", response_model=ExerciseResponse,
             status_code=status.HTTP_201_CREATED, )
def create_exercise(data: ExerciseCreate, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = ExerciseService(db)
    return service.create(user.id, data)


@router.delete("/{exercise_id}", summary="Delete a custom exercise.", status_code=status.HTTP_204_NO_CONTENT, )
def delete_exercise(exercise_id: str, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = ExerciseService(db)
    service.delete(user.id, exercise_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
