"""
Fake Repository Implementations for Testing.

This package provides in-memory fake implementations of repository interfaces
for fast, isolated testing. No database or external dependencies required.

Features:
- Fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Supports reset() for test isolation
- Factory functions for common test scenarios

Usage:
    from tests.fakes import FakeWorkoutRepository, create_workout_repo

    # Direct instantiation
    repo = FakeWorkoutRepository()
    repo.seed_workout("user1", "2024-01-17T14:30:00+00:00")

    # Factory function with the bench press scenario pre-populated
    repo = create_workout_repo(user_id="user1")
"""
from tests.fakes.workout_repository import FakeWorkoutRepository


# =============================================================================
# Factory Functions
# =============================================================================


def create_workout_repo(
    *,
    user_id: str = "u1",
    workout_date: str = "2024-01-17T23:30:00+09:00",
) -> FakeWorkoutRepository:
    """
    Create a FakeWorkoutRepository holding one bench press workout.

    The workout has one exercise ("Bench Press") with two sets:
    {1, 8, 82.5 kg} and {2, 6, 85 kg}.

    Args:
        user_id: Owner of the seeded workout
        workout_date: ISO timestamp the workout is dated to

    Returns:
        FakeWorkoutRepository with the workout stored
    """
    repo = FakeWorkoutRepository()
    bench = repo.add_catalog_entry("Bench Press")
    repo.seed_workout(
        user_id,
        workout_date,
        name="Push Day",
        exercises=[
            {
                "exercise_catalog_id": bench.id,
                "order": 1,
                "sets": [
                    {"set_number": 1, "reps": 8, "weight": "82.5", "weight_unit": "kg"},
                    {"set_number": 2, "reps": 6, "weight": "85", "weight_unit": "kg"},
                ],
            }
        ],
    )
    return repo


__all__ = [
    "FakeWorkoutRepository",
    "create_workout_repo",
]
