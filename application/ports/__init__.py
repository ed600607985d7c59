"""
Repository Interfaces (Ports) for the workout timeline service.

This package defines abstract interfaces that decouple domain logic from
infrastructure (storage, static catalogs). Implementations are provided
in the infrastructure layer.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the domain needs)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import WorkoutRepository, SoundCatalog

    class WorkoutService:
        def __init__(self, workout_repo: WorkoutRepository, sounds: SoundCatalog):
            self.workout_repo = workout_repo
            self.sounds = sounds
"""

# Workout persistence
from application.ports.workout_repository import WorkoutRepository

# Training log persistence
from application.ports.training_repository import TrainingRepository

# Static sound lookup
from application.ports.sound_catalog import SoundCatalog

__all__ = [
    "WorkoutRepository",
    "TrainingRepository",
    "SoundCatalog",
]
