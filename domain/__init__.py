"""
Domain layer for the workout timeline service.

This package contains pure domain models and services that are independent
of infrastructure concerns (storage, HTTP, external services).
"""

from domain.models import (
    Card,
    ExerciseType,
    StepType,
    SubsetExercise,
    TrainingState,
    Workout,
    WorkoutStep,
    WorkoutSubset,
)

__all__ = [
    "Card",
    "ExerciseType",
    "StepType",
    "SubsetExercise",
    "TrainingState",
    "Workout",
    "WorkoutStep",
    "WorkoutSubset",
]
