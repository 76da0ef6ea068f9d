"""
Workouts router for owner-scoped workout retrieval.

This router contains endpoints for:
- /workouts?date=YYYY-MM-DD - Workouts logged on a calendar day (default: today)
- /workouts/{workout_id} - A single workout owned by the caller

Calendar days are resolved in the configured target timezone. A workout that
belongs to another user returns the same 404 as one that does not exist.
"""

import datetime as dt
import logging
from typing import List, NoReturn, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel

from api.deps import get_current_user, get_workout_use_case
from application.use_cases import GetWorkoutUseCase
from domain.models import WorkoutView
from domain.services import today_in_zone

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Workouts"],
)


# =============================================================================
# Response Models
# =============================================================================


class DayWindowResponse(BaseModel):
    """Half-open UTC interval [start, end) covering the requested day."""
    start: dt.datetime
    end: dt.datetime


class WorkoutsForDateResponse(BaseModel):
    """Response for listing a day's workouts."""
    success: bool = True
    date: dt.date
    timezone: str
    window: DayWindowResponse
    workouts: List[WorkoutView] = []
    count: int = 0


class WorkoutResponse(BaseModel):
    """Response for a single workout."""
    success: bool = True
    workout: WorkoutView


# =============================================================================
# Helper Functions
# =============================================================================


_ERROR_STATUS = {
    "unauthenticated": 401,
    "not_found": 404,
    "invalid_date": 422,
    "store_unavailable": 503,
}


def _raise_for_error(error_code: Optional[str], error: Optional[str]) -> NoReturn:
    """Translate a failed use-case result into an HTTP error."""
    status_code = _ERROR_STATUS.get(error_code or "", 500)
    if error_code == "not_found":
        # Same body for "missing" and "not yours"
        error = "Workout not found"
    raise HTTPException(status_code=status_code, detail=error or "Request failed")


# =============================================================================
# Endpoints
# =============================================================================


@router.get("/workouts", response_model=WorkoutsForDateResponse)
def get_workouts_for_date_endpoint(
    date: Optional[str] = Query(
        None,
        description="Calendar date (YYYY-MM-DD) in the target timezone; defaults to today",
    ),
    user_id: str = Depends(get_current_user),
    use_case: GetWorkoutUseCase = Depends(get_workout_use_case),
):
    """Get the authenticated user's workouts for a calendar date, most recent first."""
    calendar_date = date if date is not None else today_in_zone(use_case.timezone)

    result = use_case.list_workouts_for_date(user_id, calendar_date)
    if not result.success:
        _raise_for_error(result.error_code, result.error)

    return WorkoutsForDateResponse(
        date=result.calendar_date,
        timezone=str(use_case.timezone),
        window=DayWindowResponse(start=result.window.start, end=result.window.end),
        workouts=result.workouts,
        count=result.count,
    )


@router.get("/workouts/{workout_id}", response_model=WorkoutResponse)
def get_workout_endpoint(
    workout_id: int,
    user_id: str = Depends(get_current_user),
    use_case: GetWorkoutUseCase = Depends(get_workout_use_case),
):
    """Get a single workout by ID."""
    result = use_case.get_workout_by_id(user_id, workout_id)
    if not result.success:
        _raise_for_error(result.error_code, result.error)

    return WorkoutResponse(workout=result.workout)
