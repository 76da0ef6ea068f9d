"""
Router package for the Lifting Diary API.

This package contains all API routers organized by domain:
- health: Health check endpoint
- workouts: Owner-scoped workout retrieval
"""

from api.routers.health import router as health_router
from api.routers.workouts import router as workouts_router

__all__ = [
    "health_router",
    "workouts_router",
]
