"""
Infrastructure Layer for the Lifting Diary API.

This package contains concrete implementations of repository interfaces:
- db/: Supabase database implementations, schema constants and DDL
"""

# Re-export database repositories for convenient access
from infrastructure.db import SupabaseWorkoutRepository

__all__ = [
    "SupabaseWorkoutRepository",
]
