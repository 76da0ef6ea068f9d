"""
Get Workout Use Case.

This use case handles the two owner-scoped reads of logged workouts:

- list_workouts_for_date: every workout a user logged on a calendar date,
  where "the date" is local midnight to local midnight in the target timezone
- get_workout_by_id: one workout, only if the caller owns it

Both return result objects rather than raising; the failure taxonomy is in
application.exceptions.
"""
import logging
import re
from dataclasses import dataclass, field
from datetime import date, datetime, tzinfo
from typing import List, Optional, Union

from application.exceptions import (
    InvalidDate,
    Unauthenticated,
    WorkoutNotFound,
    WorkoutRetrievalError,
)
from application.ports import WorkoutRepository
from application.services import join_workouts
from domain.converters import shape_workout, shape_workouts
from domain.models import WorkoutView
from domain.services import DayWindow, compute_day_window, resolve_timezone

logger = logging.getLogger(__name__)

_CALENDAR_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_calendar_date(value: Union[str, date]) -> date:
    """
    Parse a civil date.

    Accepts a ``date`` or a strict ``YYYY-MM-DD`` string. A ``datetime`` is
    rejected because its time and zone would be silently discarded.

    Raises:
        InvalidDate: If the value is not a valid calendar date

    Examples:
        >>> parse_calendar_date("2024-01-17")
        datetime.date(2024, 1, 17)
    """
    if isinstance(value, datetime):
        raise InvalidDate(f"Expected a calendar date, got a datetime: {value!r}")
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not _CALENDAR_DATE_RE.match(value.strip()):
        raise InvalidDate(f"Invalid date {value!r}, expected YYYY-MM-DD")
    try:
        return date.fromisoformat(value.strip())
    except ValueError as e:
        raise InvalidDate(f"Invalid date {value!r}: {e}") from e


def _require_user(user_id: Optional[str]) -> str:
    if not isinstance(user_id, str) or not user_id.strip():
        raise Unauthenticated("No user identity supplied")
    return user_id


@dataclass
class GetWorkoutResult:
    """Result of getting a single workout."""
    success: bool
    workout: Optional[WorkoutView] = None
    error: Optional[str] = None
    error_code: Optional[str] = None


@dataclass
class ListWorkoutsForDateResult:
    """Result of listing a user's workouts for one calendar date."""
    success: bool
    workouts: List[WorkoutView] = field(default_factory=list)
    count: int = 0
    calendar_date: Optional[date] = None
    window: Optional[DayWindow] = None
    error: Optional[str] = None
    error_code: Optional[str] = None


class GetWorkoutUseCase:
    """
    Use case for retrieving a user's logged workouts.

    The target timezone is injected rather than read from configuration so
    the day-window arithmetic stays a pure function of its inputs.
    """

    def __init__(self, workout_repo: WorkoutRepository, target_timezone: Union[str, tzinfo]):
        """
        Initialize with required dependencies.

        Args:
            workout_repo: Repository for owner-scoped workout reads
            target_timezone: Zone whose midnights delimit calendar days

        Raises:
            InvalidTimezone: If the zone name is unknown
        """
        self._workout_repo = workout_repo
        self._timezone = resolve_timezone(target_timezone)

    @property
    def timezone(self) -> tzinfo:
        return self._timezone

    def list_workouts_for_date(
        self,
        user_id: Optional[str],
        calendar_date: Union[str, date],
    ) -> ListWorkoutsForDateResult:
        """
        List a user's workouts dated within one local calendar day.

        Args:
            user_id: Verified user id of the caller
            calendar_date: Civil date (``date`` or ``YYYY-MM-DD``)

        Returns:
            ListWorkoutsForDateResult with workouts most recent first, or an
            error (unauthenticated, invalid_date, store_unavailable)
        """
        try:
            owner = _require_user(user_id)
            day = parse_calendar_date(calendar_date)
            try:
                window = compute_day_window(day, self._timezone)
            except OverflowError as e:
                raise InvalidDate(f"Date {day} is outside the representable range") from e

            snapshot = self._workout_repo.fetch_for_window(owner, window.start, window.end)
            workouts = shape_workouts(join_workouts(snapshot, owner))
        except WorkoutRetrievalError as e:
            logger.warning(f"Listing workouts for {calendar_date!r} failed ({e.code}): {e}")
            return ListWorkoutsForDateResult(success=False, error=str(e), error_code=e.code)

        logger.debug(
            f"Found {len(workouts)} workout(s) for user {owner} on {day} "
            f"[{window.start.isoformat()}, {window.end.isoformat()})"
        )
        return ListWorkoutsForDateResult(
            success=True,
            workouts=workouts,
            count=len(workouts),
            calendar_date=day,
            window=window,
        )

    def get_workout_by_id(
        self,
        user_id: Optional[str],
        workout_id: int,
    ) -> GetWorkoutResult:
        """
        Get a single workout owned by the caller.

        A workout owned by someone else yields the same not_found result as
        an id that does not exist.

        Args:
            user_id: Verified user id of the caller
            workout_id: ID of the workout to retrieve

        Returns:
            GetWorkoutResult with the workout view or an error
        """
        try:
            owner = _require_user(user_id)
            if isinstance(workout_id, bool) or not isinstance(workout_id, int) or workout_id <= 0:
                raise WorkoutNotFound("Workout not found")

            snapshot = self._workout_repo.fetch_by_id(owner, workout_id)
            aggregates = [
                a for a in join_workouts(snapshot, owner) if a.workout.id == workout_id
            ]
            if not aggregates:
                raise WorkoutNotFound("Workout not found")
        except WorkoutRetrievalError as e:
            logger.info(f"Getting workout {workout_id!r} failed ({e.code})")
            return GetWorkoutResult(success=False, error=str(e), error_code=e.code)

        return GetWorkoutResult(success=True, workout=shape_workout(aggregates[0]))
