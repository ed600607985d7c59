"""
API package for the workout timeline service.

This package contains:
- deps.py: FastAPI dependency providers for DI
- routers/: API route handlers
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_settings,
    get_workout_repo,
    get_training_repo,
    get_sound_catalog,
    get_save_workout_use_case,
    get_get_workout_use_case,
    get_start_training_use_case,
    get_complete_training_use_case,
    get_training_history_use_case,
    get_templates_use_case,
)

__all__ = [
    # Settings
    "get_settings",
    # Repositories
    "get_workout_repo",
    "get_training_repo",
    "get_sound_catalog",
    # Use cases
    "get_save_workout_use_case",
    "get_get_workout_use_case",
    "get_start_training_use_case",
    "get_complete_training_use_case",
    "get_training_history_use_case",
    "get_templates_use_case",
]
