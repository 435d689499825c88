"""
Dashboard API schemas.
"""

import datetime
from typing import Optional

from pydantic import BaseModel


class LiftStat(BaseModel):
    """Best weight for one base lift."""

    exercise: str
    best_weight: float


class DashboardResponse(BaseModel):
    stats: list[LiftStat]
    plans_count: int
    workouts_count: int
    last_workout_at: Optional[datetime.datetime]
