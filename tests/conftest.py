"""
Pytest fixtures for lifting-diary-api tests.

Provides a test app wired to in-memory fakes: the Supabase repository is
replaced by FakeWorkoutRepository and Clerk auth by a fixed user id.
"""

from typing import Callable, Generator

import pytest
from fastapi.testclient import TestClient

from api.deps import get_current_user, get_settings, get_workout_repo
from backend.main import create_app
from backend.settings import Settings
from tests.fakes import FakeWorkoutRepository, create_workout_repo


# ---------------------------------------------------------------------------
# Auth Mock
# ---------------------------------------------------------------------------

TEST_USER_ID = "u1"
OTHER_USER_ID = "u2"


async def mock_get_current_user() -> str:
    """Mock auth dependency that returns a test user."""
    return TEST_USER_ID


# ---------------------------------------------------------------------------
# Test App and Client
# ---------------------------------------------------------------------------


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with minimal configuration."""
    return Settings(
        environment="test",
        target_timezone="Asia/Tokyo",
        _env_file=None,
    )


@pytest.fixture
def app(test_settings):
    """Create test application instance."""
    return create_app(settings=test_settings)


@pytest.fixture
def fake_workout_repo() -> FakeWorkoutRepository:
    """Fake repository holding u1's bench press workout on 2024-01-17 (JST)."""
    return create_workout_repo(user_id=TEST_USER_ID)


@pytest.fixture
def client(app, test_settings, fake_workout_repo) -> Generator[TestClient, None, None]:
    """
    Per-test FastAPI TestClient backed by the fake repository.
    Properly cleans up dependency overrides after each test.
    """
    app.dependency_overrides[get_current_user] = mock_get_current_user
    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_workout_repo] = lambda: fake_workout_repo
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def login_as(app) -> Callable[[str], None]:
    """Switch the authenticated user for subsequent requests."""

    def _login_as(user_id: str) -> None:
        async def _user() -> str:
            return user_id

        app.dependency_overrides[get_current_user] = _user

    return _login_as
