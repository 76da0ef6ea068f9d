"""
Supabase implementation of WorkoutRepository.

This module provides the concrete Supabase implementation for owner-scoped
workout reads. Each method issues exactly one PostgREST request: the owner
filter sits in the same predicate as the date window or workout id, and the
nested exercises, catalog entries and sets are embedded in the same select.
"""
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from application.exceptions import StoreUnavailable
from application.ports import WorkoutSnapshot
from domain.converters import (
    db_row_to_catalog_entry,
    db_row_to_exercise_set,
    db_row_to_workout,
    db_row_to_workout_exercise,
)
from infrastructure.db.schema import (
    EXERCISE_CATALOG_TABLE,
    EXERCISE_SETS_TABLE,
    WORKOUT_EXERCISES_TABLE,
    WORKOUT_TREE_SELECT,
    WORKOUTS_TABLE,
)

logger = logging.getLogger(__name__)


def _to_utc_param(value: datetime) -> str:
    """Format an aware datetime as a UTC ``Z`` timestamp for a query param."""
    if value.tzinfo is None:
        raise ValueError("Query bounds must be timezone-aware")
    return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%fZ")


def snapshot_from_rows(rows: List[Dict[str, Any]]) -> WorkoutSnapshot:
    """
    Flatten embedded workout rows into a WorkoutSnapshot.

    Args:
        rows: ``workouts`` rows, each with embedded ``workout_exercises``
            carrying ``exercise_catalog`` (object) and ``exercise_sets`` (list)

    Raises:
        KeyError, ValueError: If a row is missing required columns
    """
    workouts = []
    exercises = []
    sets = []
    catalog = {}

    for row in rows:
        workouts.append(db_row_to_workout(row))
        for exercise_row in row.get(WORKOUT_EXERCISES_TABLE) or []:
            exercises.append(db_row_to_workout_exercise(exercise_row))

            catalog_row = exercise_row.get(EXERCISE_CATALOG_TABLE)
            if catalog_row:
                entry = db_row_to_catalog_entry(catalog_row)
                catalog[entry.id] = entry

            for set_row in exercise_row.get(EXERCISE_SETS_TABLE) or []:
                sets.append(db_row_to_exercise_set(set_row))

    return WorkoutSnapshot(
        workouts=tuple(workouts),
        exercises=tuple(exercises),
        sets=tuple(sets),
        catalog=catalog,
    )


class SupabaseWorkoutRepository:
    """
    Supabase implementation of WorkoutRepository protocol.

    All Supabase query logic for workout reads is encapsulated here.
    The client is injected via constructor for testability.
    """

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected, not global)
        """
        self._client = client

    def _execute(self, query, description: str) -> List[Dict[str, Any]]:
        try:
            result = query.execute()
        except (APIError, httpx.HTTPError) as e:
            logger.error(f"Failed to {description}: {e}")
            raise StoreUnavailable(f"Workout store unavailable while trying to {description}") from e
        return result.data or []

    def _to_snapshot(self, rows: List[Dict[str, Any]], description: str) -> WorkoutSnapshot:
        try:
            return snapshot_from_rows(rows)
        except (KeyError, ValueError) as e:
            logger.error(f"Malformed rows while trying to {description}: {e}")
            raise StoreUnavailable(f"Workout store returned malformed rows while trying to {description}") from e

    def fetch_for_window(
        self,
        owner_user_id: str,
        start: datetime,
        end: datetime,
    ) -> WorkoutSnapshot:
        """Fetch the owner's workouts dated within ``[start, end)``."""
        query = (
            self._client.table(WORKOUTS_TABLE)
            .select(WORKOUT_TREE_SELECT)
            .eq("user_id", owner_user_id)
            .gte("workout_date", _to_utc_param(start))
            .lt("workout_date", _to_utc_param(end))
            .order("workout_date", desc=True)
            .order("id")
        )
        rows = self._execute(query, "list workouts for window")
        logger.debug(f"Fetched {len(rows)} workout row(s) for {owner_user_id} in [{start}, {end})")
        return self._to_snapshot(rows, "list workouts for window")

    def fetch_by_id(
        self,
        owner_user_id: str,
        workout_id: int,
    ) -> WorkoutSnapshot:
        """Fetch one workout matching both id and owner."""
        query = (
            self._client.table(WORKOUTS_TABLE)
            .select(WORKOUT_TREE_SELECT)
            .eq("id", workout_id)
            .eq("user_id", owner_user_id)
            .limit(1)
        )
        rows = self._execute(query, f"get workout {workout_id}")
        return self._to_snapshot(rows, f"get workout {workout_id}")
