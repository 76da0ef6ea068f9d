"""
Application Use Cases for the Lifting Diary API.

Use cases orchestrate domain logic and coordinate between ports/adapters.
They are the entry points for business operations.

Architecture follows Clean Architecture / Hexagonal pattern:
- Use cases orchestrate domain objects and repository ports
- Dependencies are injected via constructors for testability
- Use cases return result objects, not API responses

Usage:
    from application.use_cases import GetWorkoutUseCase

    use_case = GetWorkoutUseCase(workout_repo=workout_repo, target_timezone="Asia/Tokyo")
    result = use_case.list_workouts_for_date("user_123", "2024-01-17")
    result = use_case.get_workout_by_id("user_123", 42)
"""

from application.use_cases.get_workout import (
    GetWorkoutResult,
    GetWorkoutUseCase,
    ListWorkoutsForDateResult,
    parse_calendar_date,
)

__all__ = [
    "GetWorkoutUseCase",
    "GetWorkoutResult",
    "ListWorkoutsForDateResult",
    "parse_calendar_date",
]
