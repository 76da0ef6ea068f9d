"""
Workout Repository Interface (Port).

This module defines the abstract interface for reading logged workouts.
Implementations may use Supabase, in-memory storage, or other backends.

Every method is owner-scoped: the owner's user id is part of the same
predicate that selects workouts, so rows belonging to other users are never
materialized. Each call is a single consistent read returning a
WorkoutSnapshot of flat rows; joining and ordering them is the
application's job (see application.services.workout_join).
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Protocol, Tuple

from domain.models import ExerciseCatalogEntry, ExerciseSet, Workout, WorkoutExercise


@dataclass(frozen=True)
class WorkoutSnapshot:
    """Flat rows read in one consistent query, not yet joined or ordered."""
    workouts: Tuple[Workout, ...] = ()
    exercises: Tuple[WorkoutExercise, ...] = ()
    sets: Tuple[ExerciseSet, ...] = ()
    catalog: Dict[int, ExerciseCatalogEntry] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not self.workouts


class WorkoutRepository(Protocol):
    """
    Abstract interface for owner-scoped workout reads.

    Implementations must raise application.exceptions.StoreUnavailable when
    the underlying store fails or times out, and must never return rows
    owned by a different user.
    """

    def fetch_for_window(
        self,
        owner_user_id: str,
        start: datetime,
        end: datetime,
    ) -> WorkoutSnapshot:
        """
        Fetch the owner's workouts dated within ``[start, end)``.

        Args:
            owner_user_id: Verified external user id (Clerk user id)
            start: Inclusive aware UTC lower bound
            end: Exclusive aware UTC upper bound

        Returns:
            Snapshot with matching workouts and their exercises, sets and
            referenced catalog entries

        Raises:
            StoreUnavailable: If the store call fails
        """
        ...

    def fetch_by_id(
        self,
        owner_user_id: str,
        workout_id: int,
    ) -> WorkoutSnapshot:
        """
        Fetch one workout matching both ``workout_id`` and ``owner_user_id``.

        Args:
            owner_user_id: Verified external user id
            workout_id: Workout id

        Returns:
            Snapshot with zero or one workout (empty if not found or not owned)

        Raises:
            StoreUnavailable: If the store call fails
        """
        ...
