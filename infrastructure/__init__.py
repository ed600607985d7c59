"""
Infrastructure Layer for the workout timeline service.

This package contains concrete implementations of the application ports:
- db/: In-memory workout and training repositories
- sounds/: Built-in sound catalog
"""

# Re-export adapters for convenient access
from infrastructure.db import (
    InMemoryWorkoutRepository,
    InMemoryTrainingRepository,
)
from infrastructure.sounds import BuiltinSoundCatalog

__all__ = [
    "InMemoryWorkoutRepository",
    "InMemoryTrainingRepository",
    "BuiltinSoundCatalog",
]
