"""
Infrastructure Storage Layer.

This package provides in-memory implementations of the repository interfaces
defined in application.ports. These implementations can be injected into use
cases and routers for clean separation of concerns and testability.

Usage:
    from infrastructure.db import (
        InMemoryWorkoutRepository,
        InMemoryTrainingRepository,
    )

    workout_repo = InMemoryWorkoutRepository()
    training_repo = InMemoryTrainingRepository()
"""

from infrastructure.db.workout_repository import InMemoryWorkoutRepository
from infrastructure.db.training_repository import InMemoryTrainingRepository

__all__ = [
    # Workout definitions
    "InMemoryWorkoutRepository",

    # Completed trainings
    "InMemoryTrainingRepository",
]
