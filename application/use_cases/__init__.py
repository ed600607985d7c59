"""
Application Use Cases for the workout timeline service.

This package contains application-level use cases that orchestrate domain logic
and coordinate between ports/adapters. Use cases are the entry points for
business operations and contain the application's workflow logic.

Architecture follows Clean Architecture / Hexagonal pattern:
- Use cases orchestrate domain objects and repository ports
- Dependencies are injected via constructors for testability
- Use cases return result dataclasses, not API responses

Usage:
    from application.use_cases import (
        SaveWorkoutUseCase,
        StartTrainingUseCase,
    )

    # Save a workout
    save_use_case = SaveWorkoutUseCase(
        workout_repo=workout_repo,
        sound_catalog=sound_catalog,
    )
    result = save_use_case.execute_create(request)

    # Start a training
    start_use_case = StartTrainingUseCase(
        workout_repo=workout_repo,
        sound_catalog=sound_catalog,
    )
    result = start_use_case.execute(workout_id="w-123")
"""

from application.use_cases.complete_training import (
    CompleteTrainingResult,
    CompleteTrainingUseCase,
)
from application.use_cases.get_workout import (
    DeleteWorkoutResult,
    GetWorkoutResult,
    GetWorkoutUseCase,
    ListWorkoutsResult,
)
from application.use_cases.save_workout import (
    SaveWorkoutResult,
    SaveWorkoutUseCase,
    WorkoutValidationError,
    workout_to_step_inputs,
)
from application.use_cases.start_training import (
    StartTrainingResult,
    StartTrainingUseCase,
)
from application.use_cases.training_history import (
    StepTimingsResult,
    TrainingHistoryResult,
    TrainingHistoryUseCase,
)
from application.use_cases.templates import (
    ListTemplatesResult,
    TemplateResult,
    TemplatesUseCase,
)

__all__ = [
    # SaveWorkout
    "SaveWorkoutUseCase",
    "SaveWorkoutResult",
    "WorkoutValidationError",
    "workout_to_step_inputs",
    # GetWorkout
    "GetWorkoutUseCase",
    "GetWorkoutResult",
    "ListWorkoutsResult",
    "DeleteWorkoutResult",
    # Trainings
    "StartTrainingUseCase",
    "StartTrainingResult",
    "CompleteTrainingUseCase",
    "CompleteTrainingResult",
    "TrainingHistoryUseCase",
    "TrainingHistoryResult",
    "StepTimingsResult",
    # Templates
    "TemplatesUseCase",
    "TemplateResult",
    "ListTemplatesResult",
]
