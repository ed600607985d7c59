"""
Domain models for the workout timeline service.

These models represent the core business concepts:
- Workout: The aggregate root holding ordered steps
- WorkoutStep: A pause or a set of subsets, optionally repeated
- WorkoutSubset: A group of exercises (optionally a superset)
- SubsetExercise: A single rep/stopwatch/countdown exercise
- Card/TrainingState: Flattened runtime timeline for a training
- TrainingLog/TrainingStepLog: Stored completion records

Usage:
    >>> from domain.models import Workout, WorkoutStep, StepType

    >>> workout = Workout(
    ...     name="Morning Circuit",
    ...     steps=[WorkoutStep(type=StepType.PAUSE, name="Get ready", estimated_seconds=10)],
    ... )

    >>> # Serialize to camelCase JSON
    >>> json_str = workout.model_dump_json(by_alias=True)
"""

from domain.models.card import Card, CardExercise, TrainingState
from domain.models.inputs import ExerciseInput, StepInput, SubsetInput, WorkoutRequest
from domain.models.sound import SoundOption
from domain.models.training import (
    CompleteTrainingRequest,
    StepTiming,
    TrainingHistoryItem,
    TrainingLog,
    TrainingStepLog,
)
from domain.models.workout import (
    ExerciseType,
    PauseOptions,
    StepType,
    SubsetExercise,
    Workout,
    WorkoutStep,
    WorkoutSubset,
    normalize_token,
)

__all__ = [
    # Canonical tree
    "Workout",
    "WorkoutStep",
    "WorkoutSubset",
    "SubsetExercise",
    "PauseOptions",
    # Enums
    "StepType",
    "ExerciseType",
    # Raw inputs
    "WorkoutRequest",
    "StepInput",
    "SubsetInput",
    "ExerciseInput",
    # Runtime
    "Card",
    "CardExercise",
    "TrainingState",
    # Training logs
    "CompleteTrainingRequest",
    "StepTiming",
    "TrainingLog",
    "TrainingStepLog",
    "TrainingHistoryItem",
    # Sounds
    "SoundOption",
    # Helpers
    "normalize_token",
]
