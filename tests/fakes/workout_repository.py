"""
Fake Workout Repository for testing.

This module provides an in-memory implementation of WorkoutRepository
for fast, isolated testing without database dependencies.

Rows are stored flat, like the tables, and returned in insertion order so
tests can check that ordering comes from the join plan rather than storage.
"""
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict, List, Optional, Union

from application.exceptions import StoreUnavailable
from application.ports import WorkoutSnapshot
from domain.models import (
    ExerciseCatalogEntry,
    ExerciseSet,
    Workout,
    WorkoutExercise,
)


class FakeWorkoutRepository:
    """
    In-memory fake implementation of WorkoutRepository for testing.

    Usage:
        repo = FakeWorkoutRepository()
        bench = repo.add_catalog_entry("Bench Press")
        workout_id = repo.seed_workout(
            user_id="u1",
            workout_date="2024-01-17T14:30:00+00:00",
            exercises=[{"exercise_catalog_id": bench.id, "order": 1,
                        "sets": [{"set_number": 1, "reps": 8, "weight": "82.5"}]}],
        )
        snapshot = repo.fetch_by_id("u1", workout_id)
    """

    def __init__(self):
        """Initialize with empty storage."""
        self.reset()

    def reset(self) -> None:
        """Clear all stored rows and failure settings."""
        self._catalog: Dict[int, ExerciseCatalogEntry] = {}
        self._workouts: List[Workout] = []
        self._exercises: List[WorkoutExercise] = []
        self._sets: List[ExerciseSet] = []
        self._next_id = 1
        self.fail_with: Optional[Exception] = None
        self.calls: List[Dict[str, Any]] = []

    def _new_id(self) -> int:
        new_id = self._next_id
        self._next_id += 1
        return new_id

    # =========================================================================
    # Seeding helpers
    # =========================================================================

    def add_catalog_entry(self, name: str, entry_id: Optional[int] = None) -> ExerciseCatalogEntry:
        """Add an exercise catalog entry."""
        entry = ExerciseCatalogEntry(id=entry_id or self._new_id(), name=name)
        self._catalog[entry.id] = entry
        return entry

    def add_workout(
        self,
        user_id: str,
        workout_date: Union[str, datetime],
        *,
        name: Optional[str] = None,
        workout_id: Optional[int] = None,
    ) -> Workout:
        """Add a bare workout row."""
        if isinstance(workout_date, str):
            workout_date = datetime.fromisoformat(workout_date)
        now = datetime.now(timezone.utc)
        workout = Workout(
            id=workout_id or self._new_id(),
            user_id=user_id,
            name=name,
            workout_date=workout_date,
            created_at=now,
            updated_at=now,
        )
        self._workouts.append(workout)
        return workout

    def add_exercise(
        self,
        workout_id: int,
        exercise_catalog_id: int,
        order: int,
        *,
        notes: Optional[str] = None,
    ) -> WorkoutExercise:
        """Add a workout_exercises row (no parent check, like a raw insert)."""
        exercise = WorkoutExercise(
            id=self._new_id(),
            workout_id=workout_id,
            exercise_catalog_id=exercise_catalog_id,
            order=order,
            notes=notes,
        )
        self._exercises.append(exercise)
        return exercise

    def add_set(
        self,
        workout_exercise_id: int,
        set_number: int,
        reps: int,
        *,
        weight: Optional[Union[str, int, Decimal]] = None,
        weight_unit: str = "kg",
    ) -> ExerciseSet:
        """Add an exercise_sets row."""
        exercise_set = ExerciseSet(
            id=self._new_id(),
            workout_exercise_id=workout_exercise_id,
            set_number=set_number,
            reps=reps,
            weight=weight,
            weight_unit=weight_unit,
        )
        self._sets.append(exercise_set)
        return exercise_set

    def seed_workout(
        self,
        user_id: str,
        workout_date: Union[str, datetime],
        *,
        name: Optional[str] = None,
        exercises: Optional[List[Dict[str, Any]]] = None,
    ) -> int:
        """
        Add a workout with nested exercises and sets.

        Args:
            exercises: Dicts with exercise_catalog_id, order, optional notes
                and ``sets`` (dicts with set_number, reps, weight, weight_unit)

        Returns:
            The new workout id
        """
        workout = self.add_workout(user_id, workout_date, name=name)
        for ex in exercises or []:
            exercise = self.add_exercise(
                workout.id,
                ex["exercise_catalog_id"],
                ex["order"],
                notes=ex.get("notes"),
            )
            for s in ex.get("sets", []):
                self.add_set(
                    exercise.id,
                    s["set_number"],
                    s["reps"],
                    weight=s.get("weight"),
                    weight_unit=s.get("weight_unit", "kg"),
                )
        return workout.id

    def _snapshot_for(self, workouts: List[Workout]) -> WorkoutSnapshot:
        workout_ids = {w.id for w in workouts}
        exercises = [e for e in self._exercises if e.workout_id in workout_ids]
        exercise_ids = {e.id for e in exercises}
        sets = [s for s in self._sets if s.workout_exercise_id in exercise_ids]
        catalog = {
            e.exercise_catalog_id: self._catalog[e.exercise_catalog_id]
            for e in exercises
            if e.exercise_catalog_id in self._catalog
        }
        return WorkoutSnapshot(
            workouts=tuple(workouts),
            exercises=tuple(exercises),
            sets=tuple(sets),
            catalog=catalog,
        )

    def _check_failure(self) -> None:
        if self.fail_with is not None:
            raise StoreUnavailable("Fake store unavailable") from self.fail_with

    # =========================================================================
    # WorkoutRepository Protocol Methods
    # =========================================================================

    def fetch_for_window(
        self,
        owner_user_id: str,
        start: datetime,
        end: datetime,
    ) -> WorkoutSnapshot:
        """Fetch the owner's workouts dated within [start, end)."""
        self.calls.append({"method": "fetch_for_window", "owner_user_id": owner_user_id, "start": start, "end": end})
        self._check_failure()
        workouts = [
            w for w in self._workouts
            if w.user_id == owner_user_id and start <= w.workout_date < end
        ]
        return self._snapshot_for(workouts)

    def fetch_by_id(
        self,
        owner_user_id: str,
        workout_id: int,
    ) -> WorkoutSnapshot:
        """Fetch one workout matching both id and owner."""
        self.calls.append({"method": "fetch_by_id", "owner_user_id": owner_user_id, "workout_id": workout_id})
        self._check_failure()
        workouts = [
            w for w in self._workouts
            if w.id == workout_id and w.user_id == owner_user_id
        ]
        return self._snapshot_for(workouts[:1])
