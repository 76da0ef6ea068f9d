"""
Domain models for the Lifting Diary API.

Entities mirror the relational schema and are immutable snapshots:
- ExerciseCatalogEntry: shared exercise reference data
- Workout / WorkoutExercise / ExerciseSet: a logged session and its contents
- WorkoutAggregate: a workout joined with its exercises, catalog entries and sets
- WorkoutTemplate / TemplateExercise: reusable per-user blueprints

View models (WorkoutView and friends) are the nested shape handed to callers.

Usage:
    >>> from domain.models import Workout, ExerciseSet

    >>> s = ExerciseSet(id=1, workout_exercise_id=1, set_number=1, reps=8, weight="82.5")
    >>> s.weight
    Decimal('82.50')
"""

from domain.models.aggregate import WorkoutAggregate, WorkoutExerciseAggregate
from domain.models.catalog import ExerciseCatalogEntry
from domain.models.template import TemplateExercise, WorkoutTemplate
from domain.models.views import ExerciseSetView, WorkoutExerciseView, WorkoutView
from domain.models.workout import (
    DEFAULT_WEIGHT_UNIT,
    ExerciseSet,
    Workout,
    WorkoutExercise,
)

__all__ = [
    # Entities
    "ExerciseCatalogEntry",
    "Workout",
    "WorkoutExercise",
    "ExerciseSet",
    "WorkoutTemplate",
    "TemplateExercise",
    # Aggregates
    "WorkoutAggregate",
    "WorkoutExerciseAggregate",
    # Views
    "WorkoutView",
    "WorkoutExerciseView",
    "ExerciseSetView",
    # Constants
    "DEFAULT_WEIGHT_UNIT",
]
