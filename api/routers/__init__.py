"""
Router package for the workout timeline service.

This package contains all API routers organized by domain:
- health: Liveness endpoint
- sounds: Built-in sound catalog
- workouts: Workout definition CRUD, export and import
- trainings: Training start, completion and history
- templates: Shared workout templates
"""

from api.routers.health import router as health_router
from api.routers.sounds import router as sounds_router
from api.routers.workouts import router as workouts_router
from api.routers.trainings import router as trainings_router
from api.routers.templates import router as templates_router

__all__ = [
    "health_router",
    "sounds_router",
    "workouts_router",
    "trainings_router",
    "templates_router",
]
