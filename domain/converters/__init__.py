"""
Domain converters.

- db_converters: Supabase rows -> immutable entities
- workout_shaping: joined aggregates -> nested presentation views

All converters are pure functions with no side effects.

Examples:
    >>> from domain.converters import db_row_to_workout, shape_workout
    >>> workout = db_row_to_workout(row)
    >>> view = shape_workout(aggregate)
"""

from domain.converters.db_converters import (
    db_row_to_catalog_entry,
    db_row_to_exercise_set,
    db_row_to_workout,
    db_row_to_workout_exercise,
)
from domain.converters.workout_shaping import (
    shape_exercise,
    shape_set,
    shape_workout,
    shape_workouts,
)

__all__ = [
    "db_row_to_catalog_entry",
    "db_row_to_workout",
    "db_row_to_workout_exercise",
    "db_row_to_exercise_set",
    "shape_set",
    "shape_exercise",
    "shape_workout",
    "shape_workouts",
]
