"""
Join plan for workout snapshots.

Repositories hand back flat rows. This module stitches them into aggregates
keyed by parent id and applies the display ordering explicitly, so neither
ordering nor nesting depends on how a particular store or query builder
happens to return embedded rows:

- workouts: workout_date descending; ties keep snapshot order
- exercises: ``order`` ascending (id breaks ties)
- sets: ``set_number`` ascending (id breaks ties)

Children are only attached when their parent is a workout owned by the
caller. A row that does not chain back to an owned workout is discarded and
logged; it is never returned.
"""
import logging
from collections import defaultdict
from typing import Dict, List

from application.ports import WorkoutSnapshot
from domain.models import (
    ExerciseSet,
    WorkoutAggregate,
    WorkoutExercise,
    WorkoutExerciseAggregate,
)

logger = logging.getLogger(__name__)


def join_workouts(snapshot: WorkoutSnapshot, owner_user_id: str) -> List[WorkoutAggregate]:
    """
    Build ordered aggregates for the owner's workouts in ``snapshot``.

    Args:
        snapshot: Flat rows from a single repository read
        owner_user_id: The caller's verified user id

    Returns:
        Aggregates ordered most recent first, exercises and sets in display order
    """
    owned = [w for w in snapshot.workouts if w.user_id == owner_user_id]
    if len(owned) != len(snapshot.workouts):
        logger.error(
            f"Discarded {len(snapshot.workouts) - len(owned)} workout row(s) "
            f"not owned by {owner_user_id}"
        )
    owned_ids = {w.id for w in owned}

    exercises_by_workout: Dict[int, List[WorkoutExercise]] = defaultdict(list)
    for exercise in snapshot.exercises:
        if exercise.workout_id in owned_ids:
            exercises_by_workout[exercise.workout_id].append(exercise)
        else:
            logger.warning(f"Discarded workout exercise {exercise.id} with unowned parent")

    attached_exercise_ids = {
        e.id for exercises in exercises_by_workout.values() for e in exercises
    }

    sets_by_exercise: Dict[int, List[ExerciseSet]] = defaultdict(list)
    for exercise_set in snapshot.sets:
        if exercise_set.workout_exercise_id in attached_exercise_ids:
            sets_by_exercise[exercise_set.workout_exercise_id].append(exercise_set)
        else:
            logger.warning(f"Discarded set {exercise_set.id} with unowned parent")

    # sorted() is stable with reverse=True, so equal dates keep snapshot order
    ordered = sorted(owned, key=lambda w: w.workout_date, reverse=True)

    aggregates = []
    for workout in ordered:
        exercises = sorted(exercises_by_workout.get(workout.id, []), key=lambda e: (e.order, e.id))
        aggregates.append(
            WorkoutAggregate(
                workout=workout,
                exercises=[
                    WorkoutExerciseAggregate(
                        entry=exercise,
                        catalog=snapshot.catalog.get(exercise.exercise_catalog_id),
                        sets=sorted(
                            sets_by_exercise.get(exercise.id, []),
                            key=lambda s: (s.set_number, s.id),
                        ),
                    )
                    for exercise in exercises
                ],
            )
        )
    return aggregates
