"""
Presentation shape for retrieved workouts.

This is the contract handed to UI callers:

    Workout { id, name, workout_date, exercises: [
        { id, exercise_name, notes, sets: [
            { id, set_number, reps, weight, weight_unit } ] } ] }

Weights serialize as decimal strings ("82.50") so clients never see binary
float artefacts.
"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ExerciseSetView(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    set_number: int
    reps: int
    weight: Optional[Decimal] = None
    weight_unit: str


class WorkoutExerciseView(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    exercise_name: Optional[str] = Field(
        default=None,
        description="Catalog name; None only if the catalog row could not be read",
    )
    notes: Optional[str] = None
    sets: List[ExerciseSetView] = Field(default_factory=list)


class WorkoutView(BaseModel):
    """A workout with its exercises and sets, already in display order."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: Optional[str] = None
    workout_date: datetime
    exercises: List[WorkoutExerciseView] = Field(default_factory=list)
