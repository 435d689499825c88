"""
Health endpoint.
"""

from fastapi import APIRouter

from app.core.config import settings
from app.schemas.health import HealthResponse

router = APIRouter()


@router.get("", summary="Health check endpoint for monitoring.", response_model=HealthResponse)
def health_check():
    return HealthResponse(ok=True, service="api", version=settings.VERSION)
