"""
FastAPI Dependency Providers for the Lifting Diary API.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations. This
enables clean separation of concerns and easy testing with fake implementations.

Architecture:
- Settings and Supabase client are cached per-process (lru_cache)
- Repository and use-case providers create new instances per-request
- Auth provider wraps the Clerk/API-key logic in backend.auth

Usage in routers:
    from api.deps import get_current_user, get_workout_use_case
    from application.use_cases import GetWorkoutUseCase

    @router.get("/workouts")
    def list_workouts(
        user_id: str = Depends(get_current_user),
        use_case: GetWorkoutUseCase = Depends(get_workout_use_case),
    ):
        return use_case.list_workouts_for_date(user_id, "2024-01-17")

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_workout_repo] = lambda: FakeWorkoutRepository()
"""

from functools import lru_cache
from typing import Optional

from fastapi import Depends, Header, HTTPException
from supabase import Client, create_client
from supabase.client import ClientOptions

# Protocol types (interfaces)
from application.ports import WorkoutRepository
from application.use_cases import GetWorkoutUseCase

# Concrete implementations
from infrastructure import SupabaseWorkoutRepository

from backend.settings import Settings, get_settings as _get_settings

# Auth from existing module (wrap to maintain single source of truth)
from backend.auth import get_current_user as _get_current_user


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.
    Use this as a FastAPI dependency for settings access.

    Returns:
        Settings: Application settings instance
    """
    return _get_settings()


# =============================================================================
# Supabase Client Provider
# =============================================================================


@lru_cache
def get_supabase_client() -> Optional[Client]:
    """
    Get Supabase client instance (cached).

    Creates a Supabase client using credentials from settings, with the
    PostgREST timeout applied so a slow store fails instead of hanging.
    Returns None if credentials are not configured.

    Returns:
        Client: Supabase client instance, or None if not configured
    """
    settings = _get_settings()

    if not settings.supabase_url or not settings.supabase_key:
        return None

    return create_client(
        settings.supabase_url,
        settings.supabase_key,
        options=ClientOptions(postgrest_client_timeout=settings.supabase_timeout_seconds),
    )


def get_supabase_client_required() -> Client:
    """
    Get Supabase client instance, raising if not configured.

    Use this dependency when the endpoint requires database access.

    Returns:
        Client: Supabase client instance

    Raises:
        HTTPException: 503 if Supabase is not configured
    """
    client = get_supabase_client()
    if client is None:
        raise HTTPException(
            status_code=503,
            detail="Database not available. Supabase credentials not configured.",
        )
    return client


# =============================================================================
# Repository Providers
# =============================================================================


def get_workout_repo(
    client: Client = Depends(get_supabase_client_required),
) -> WorkoutRepository:
    """
    Get WorkoutRepository implementation.

    Returns a SupabaseWorkoutRepository instance with injected client.
    The return type is the Protocol to enable easy faking.

    Args:
        client: Supabase client (injected)

    Returns:
        WorkoutRepository: Repository for owner-scoped workout reads
    """
    return SupabaseWorkoutRepository(client)


# =============================================================================
# Use Case Providers
# =============================================================================


def get_workout_use_case(
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
    settings: Settings = Depends(get_settings),
) -> GetWorkoutUseCase:
    """
    Get GetWorkoutUseCase with the repository and target timezone injected.

    Args:
        workout_repo: Workout repository (injected)
        settings: Application settings (injected)

    Returns:
        GetWorkoutUseCase: Use case for workout retrieval
    """
    return GetWorkoutUseCase(
        workout_repo=workout_repo,
        target_timezone=settings.target_timezone,
    )


# =============================================================================
# Authentication Providers
# =============================================================================


async def get_current_user(
    authorization: Optional[str] = Header(None),
    x_api_key: Optional[str] = Header(None, alias="X-API-Key"),
) -> str:
    """
    Get the current authenticated user ID.

    Wraps backend.auth.get_current_user for dependency injection.
    Supports:
    - Clerk JWT (RS256 via JWKS)
    - API key authentication

    Args:
        authorization: Bearer token header
        x_api_key: API key header

    Returns:
        str: User ID from authentication

    Raises:
        HTTPException: 401 if authentication fails
    """
    return await _get_current_user(
        authorization=authorization,
        x_api_key=x_api_key,
    )


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Settings
    "get_settings",
    # Database
    "get_supabase_client",
    "get_supabase_client_required",
    # Repositories
    "get_workout_repo",
    # Use cases
    "get_workout_use_case",
    # Authentication
    "get_current_user",
]
