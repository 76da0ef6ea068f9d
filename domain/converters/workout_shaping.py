"""
Shaping: joined workout aggregates -> presentation views.

Pure projection. Order is whatever the join plan established; nothing is
re-sorted here, and rows with null optional fields (name, notes, weight) are
kept as-is.
"""

import logging
from typing import Iterable, List

from domain.models import (
    ExerciseSet,
    ExerciseSetView,
    WorkoutAggregate,
    WorkoutExerciseAggregate,
    WorkoutExerciseView,
    WorkoutView,
)

logger = logging.getLogger(__name__)


def shape_set(exercise_set: ExerciseSet) -> ExerciseSetView:
    return ExerciseSetView(
        id=exercise_set.id,
        set_number=exercise_set.set_number,
        reps=exercise_set.reps,
        weight=exercise_set.weight,
        weight_unit=exercise_set.weight_unit,
    )


def shape_exercise(aggregate: WorkoutExerciseAggregate) -> WorkoutExerciseView:
    """Project a workout exercise, resolving its display name from the catalog."""
    if aggregate.catalog is None:
        logger.warning(
            f"Workout exercise {aggregate.entry.id} references missing catalog entry "
            f"{aggregate.entry.exercise_catalog_id}"
        )

    return WorkoutExerciseView(
        id=aggregate.entry.id,
        exercise_name=aggregate.catalog.name if aggregate.catalog else None,
        notes=aggregate.entry.notes,
        sets=[shape_set(s) for s in aggregate.sets],
    )


def shape_workout(aggregate: WorkoutAggregate) -> WorkoutView:
    """
    Project one workout aggregate into its nested view.

    Examples:
        >>> from datetime import datetime, timezone
        >>> from domain.models import Workout
        >>> view = shape_workout(WorkoutAggregate(workout=Workout(
        ...     id=1, user_id="u1", workout_date=datetime(2024, 1, 17, tzinfo=timezone.utc),
        ... )))
        >>> view.exercises
        []
    """
    return WorkoutView(
        id=aggregate.workout.id,
        name=aggregate.workout.name,
        workout_date=aggregate.workout.workout_date,
        exercises=[shape_exercise(e) for e in aggregate.exercises],
    )


def shape_workouts(aggregates: Iterable[WorkoutAggregate]) -> List[WorkoutView]:
    """Project a sequence of aggregates, preserving order."""
    return [shape_workout(a) for a in aggregates]
