"""
Infrastructure Database Layer.

This package provides Supabase-backed implementations of the repository
interfaces defined in application.ports.

Usage:
    from supabase import create_client
    from infrastructure.db import SupabaseWorkoutRepository

    client = create_client(SUPABASE_URL, SUPABASE_KEY)
    workout_repo = SupabaseWorkoutRepository(client)
"""

from infrastructure.db.workout_repository import SupabaseWorkoutRepository

__all__ = [
    "SupabaseWorkoutRepository",
]
