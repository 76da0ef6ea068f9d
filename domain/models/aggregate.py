"""
Joined workout aggregates.

An aggregate is a Workout with its exercises (each with its catalog entry and
sets) attached in display order. Aggregates are built by the application's
join plan and projected into views by the shaping converter.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from domain.models.catalog import ExerciseCatalogEntry
from domain.models.workout import ExerciseSet, Workout, WorkoutExercise


@dataclass(frozen=True)
class WorkoutExerciseAggregate:
    """A workout exercise with its catalog entry and ordered sets."""
    entry: WorkoutExercise
    catalog: Optional[ExerciseCatalogEntry] = None
    sets: List[ExerciseSet] = field(default_factory=list)


@dataclass(frozen=True)
class WorkoutAggregate:
    """A workout with its ordered exercises."""
    workout: Workout
    exercises: List[WorkoutExerciseAggregate] = field(default_factory=list)
