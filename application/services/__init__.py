"""
Application services shared by use cases.

- workout_join: explicit join plan turning a WorkoutSnapshot into ordered,
  owner-scoped WorkoutAggregates
"""

from application.services.workout_join import join_workouts

__all__ = ["join_workouts"]
