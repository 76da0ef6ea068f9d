"""
Converters: Database row format -> domain entities.

Rows arrive from Supabase (PostgREST) as plain dicts: timestamps are ISO
strings (sometimes with a ``Z`` suffix), ``numeric`` columns are JSON numbers
or strings. These converters parse them into the immutable entities in
``domain.models``.

Database schema (see infrastructure/db/migrations):
- exercise_catalog: id, name
- workouts: id, user_id, name, workout_date, started_at, completed_at,
  created_at, updated_at
- workout_exercises: id, workout_id, exercise_catalog_id, "order", notes
- exercise_sets: id, workout_exercise_id, set_number, reps, weight,
  weight_unit
"""

from datetime import datetime
from typing import Any, Dict, Optional

from domain.models import (
    DEFAULT_WEIGHT_UNIT,
    ExerciseCatalogEntry,
    ExerciseSet,
    Workout,
    WorkoutExercise,
)


def _parse_datetime(value: Any) -> Optional[datetime]:
    """
    Parse datetime from various formats.

    Returns None only for a null column.

    Raises:
        ValueError: If the value is present but not an ISO timestamp
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        # Handle ISO format with or without timezone
        if value.endswith("Z"):
            value = value[:-1] + "+00:00"
        return datetime.fromisoformat(value)
    raise ValueError(f"Unsupported timestamp value: {value!r}")


def _require_datetime(row: Dict[str, Any], key: str) -> datetime:
    parsed = _parse_datetime(row.get(key))
    if parsed is None:
        raise ValueError(f"Row {row.get('id')!r} has missing or invalid {key}: {row.get(key)!r}")
    return parsed


def db_row_to_catalog_entry(row: Dict[str, Any]) -> ExerciseCatalogEntry:
    """
    Convert an exercise_catalog row.

    Examples:
        >>> db_row_to_catalog_entry({"id": 1, "name": "Bench Press"}).name
        'Bench Press'
    """
    return ExerciseCatalogEntry(id=row["id"], name=row["name"])


def db_row_to_workout(row: Dict[str, Any]) -> Workout:
    """
    Convert a workouts row to a domain Workout.

    Args:
        row: Dictionary representing a row from the workouts table.

    Returns:
        Workout entity with aware UTC timestamps.

    Raises:
        ValueError: If workout_date is missing or any timestamp is unparseable.

    Examples:
        >>> w = db_row_to_workout({
        ...     "id": 7,
        ...     "user_id": "user_123",
        ...     "name": None,
        ...     "workout_date": "2024-01-17T14:30:00Z",
        ... })
        >>> w.workout_date.isoformat()
        '2024-01-17T14:30:00+00:00'
    """
    return Workout(
        id=row["id"],
        user_id=row["user_id"],
        name=row.get("name"),
        workout_date=_require_datetime(row, "workout_date"),
        started_at=_parse_datetime(row.get("started_at")),
        completed_at=_parse_datetime(row.get("completed_at")),
        created_at=_parse_datetime(row.get("created_at")),
        updated_at=_parse_datetime(row.get("updated_at")),
    )


def db_row_to_workout_exercise(row: Dict[str, Any]) -> WorkoutExercise:
    """Convert a workout_exercises row."""
    return WorkoutExercise(
        id=row["id"],
        workout_id=row["workout_id"],
        exercise_catalog_id=row["exercise_catalog_id"],
        order=row["order"],
        notes=row.get("notes"),
    )


def db_row_to_exercise_set(row: Dict[str, Any]) -> ExerciseSet:
    """
    Convert an exercise_sets row.

    ``weight`` may be a number, a numeric string or null.

    Examples:
        >>> s = db_row_to_exercise_set({
        ...     "id": 1, "workout_exercise_id": 3, "set_number": 1,
        ...     "reps": 8, "weight": "82.5", "weight_unit": "kg",
        ... })
        >>> str(s.weight)
        '82.50'
    """
    weight = row.get("weight")
    if isinstance(weight, float):
        # Go through str so 82.5 does not become 82.4999...
        weight = str(weight)

    return ExerciseSet(
        id=row["id"],
        workout_exercise_id=row["workout_exercise_id"],
        set_number=row["set_number"],
        reps=row["reps"],
        weight=weight,
        weight_unit=row.get("weight_unit") or DEFAULT_WEIGHT_UNIT,
    )
