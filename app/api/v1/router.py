"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import auth, coach, exercises, health, plans, social, training, workouts

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(health.router, prefix="/health", tags=["Health"])
api_router.include_router(auth.router, prefix="/auth", tags=["Authentication"])
api_router.include_router(training.router, prefix="/training", tags=["Dashboard"])
api_router.include_router(exercises.router, prefix="/training/exercises", tags=["Exercises"])
api_router.include_router(plans.router, prefix="/training/plans", tags=["Training plans"])
api_router.include_router(workouts.router, prefix="/training/workouts", tags=["Workouts"])
api_router.include_router(coach.router, prefix="/training/coach", tags=["Coaching"])
api_router.include_router(social.router, prefix="/training", tags=["Profile and social"])
