"""
Domain layer for the Lifting Diary API.

Pure models and functions with no infrastructure concerns:
- models/: schema entities and the nested view shape
- services/: calendar-day window calculation
- converters/: store rows -> entities, aggregates -> views
"""

from domain.models import (
    ExerciseCatalogEntry,
    ExerciseSet,
    Workout,
    WorkoutExercise,
    WorkoutView,
)
from domain.services import DayWindow, compute_day_window

__all__ = [
    "ExerciseCatalogEntry",
    "ExerciseSet",
    "Workout",
    "WorkoutExercise",
    "WorkoutView",
    "DayWindow",
    "compute_day_window",
]
