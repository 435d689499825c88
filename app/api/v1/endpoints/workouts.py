"""
Workout endpoints.

CRUD for logged sets, newest first.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlmodel import Session

from app.api.dependencies import get_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.workout import WorkoutCreate, WorkoutResponse, WorkoutUpdate
from app.services.workout_service import WorkoutService

router = APIRouter()


@router.get("", summary="List workouts, most recent first.", response_model=list[WorkoutResponse], )
def list_workouts(exercise: Optional[str] = Query(None, description="Only this exercise (exact name)"),
                  skip: int = Query(0, ge=0), limit: int = Query(100, ge=1, le=500),
                  db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = WorkoutService(db)
    return service.list_for_user(user.id, exercise=exercise, skip=skip, limit=limit)


@router.post("", summary="Log a workout.", response_model=WorkoutResponse, status_code=status.HTTP_201_CREATED, )
def create_workout(data: WorkoutCreate, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = WorkoutService(db)
    return service.create(user.id, data)


@router.put("/{workout_id}", summary="Replace a logged workout.", response_model=WorkoutResponse, )
def update_workout(workout_id: str, data: WorkoutUpdate, db: Session = Depends(get_db),
                   user: User = Depends(get_current_user), ):
    service = WorkoutService(db)
    return service.update(user.id, workout_id, data)


@router.delete("/{workout_id}", summary="Delete a logged workout.", status_code=status.HTTP_204_NO_CONTENT, )
def delete_workout(workout_id: str, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = WorkoutService(db)
    service.delete(user.id, workout_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
