"""
Logged workout entities: Workout -> WorkoutExercise -> ExerciseSet.

These mirror the rows of the ``workouts``, ``workout_exercises`` and
``exercise_sets`` tables. They are read-only snapshots; nothing in this
service writes them back.
"""

from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


DEFAULT_WEIGHT_UNIT = "kg"
WEIGHT_QUANTUM = Decimal("0.01")


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Normalize a timestamp to aware UTC. Naive values are taken as UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class Workout(BaseModel):
    """
    A single logged lifting session.

    ``workout_date`` is the absolute instant the session is dated to; it is
    what calendar-day lookups compare against. Every workout has exactly one
    owner (``user_id``, the external auth provider's user id) and is only
    visible to that owner.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    user_id: str = Field(..., min_length=1, description="Owner's external user id")
    name: Optional[str] = Field(default=None, max_length=255)
    workout_date: datetime = Field(..., description="Instant the workout is dated to")
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("workout_date", "started_at", "completed_at", "created_at", "updated_at")
    @classmethod
    def validate_timestamps(cls, v: Optional[datetime]) -> Optional[datetime]:
        return _as_utc(v)


class WorkoutExercise(BaseModel):
    """An exercise performed within a workout, positioned by ``order``."""

    model_config = ConfigDict(frozen=True)

    id: int
    workout_id: int
    exercise_catalog_id: int
    order: int = Field(..., ge=0, description="Display position, unique within a workout")
    notes: Optional[str] = None


class ExerciseSet(BaseModel):
    """
    One set of a workout exercise.

    ``weight`` keeps two fractional digits (``numeric(6,2)`` in the store) and
    is optional for bodyweight work.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    workout_exercise_id: int
    set_number: int = Field(..., ge=1, description="1-based position within the exercise")
    reps: int = Field(..., gt=0)
    weight: Optional[Decimal] = None
    weight_unit: str = Field(default=DEFAULT_WEIGHT_UNIT, min_length=1, max_length=10)

    @field_validator("weight")
    @classmethod
    def validate_weight(cls, v: Optional[Decimal]) -> Optional[Decimal]:
        """Quantize weight to two decimal places."""
        if v is None:
            return None
        if v < 0:
            raise ValueError("Weight cannot be negative")
        return v.quantize(WEIGHT_QUANTUM, rounding=ROUND_HALF_UP)
