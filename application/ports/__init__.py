"""
Repository Interfaces (Ports) for the Lifting Diary API.

This package defines abstract interfaces that decouple application logic
from infrastructure (database, external services). Implementations are
provided in the infrastructure layer.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the application needs)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import WorkoutRepository

    class WorkoutService:
        def __init__(self, workout_repo: WorkoutRepository):
            self.workout_repo = workout_repo
"""

from application.ports.workout_repository import WorkoutRepository, WorkoutSnapshot

__all__ = [
    "WorkoutRepository",
    "WorkoutSnapshot",
]
