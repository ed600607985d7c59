"""
FastAPI Dependency Providers for the workout timeline service.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations. This
enables clean separation of concerns and easy testing with fake implementations.

Architecture:
- Settings are cached per-process (lru_cache)
- In-memory repositories and the sound catalog are process-wide singletons
- Use case providers build a new use case per request from the providers above

Usage in routers:
    from api.deps import get_start_training_use_case
    from application.use_cases import StartTrainingUseCase

    @router.post("/trainings")
    def start_training(
        use_case: StartTrainingUseCase = Depends(get_start_training_use_case),
    ):
        ...

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_workout_repo] = lambda: FakeWorkoutRepository()
"""

from functools import lru_cache

from fastapi import Depends

# Protocol types (interfaces)
from application.ports import (
    SoundCatalog,
    TrainingRepository,
    WorkoutRepository,
)
from application.use_cases import (
    CompleteTrainingUseCase,
    GetWorkoutUseCase,
    SaveWorkoutUseCase,
    StartTrainingUseCase,
    TemplatesUseCase,
    TrainingHistoryUseCase,
)

# Concrete implementations
from infrastructure import (
    BuiltinSoundCatalog,
    InMemoryTrainingRepository,
    InMemoryWorkoutRepository,
)

from backend.settings import Settings, get_settings as _get_settings


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.
    Use this as a FastAPI dependency for settings access.

    Returns:
        Settings: Application settings instance
    """
    return _get_settings()


# =============================================================================
# Repository Providers
# =============================================================================


@lru_cache
def _workout_store() -> InMemoryWorkoutRepository:
    return InMemoryWorkoutRepository()


@lru_cache
def _training_store() -> InMemoryTrainingRepository:
    return InMemoryTrainingRepository()


@lru_cache
def _sound_catalog(base_url: str) -> BuiltinSoundCatalog:
    return BuiltinSoundCatalog(base_url=base_url)


def get_workout_repo() -> WorkoutRepository:
    """
    Get WorkoutRepository implementation.

    Returns the process-wide InMemoryWorkoutRepository.
    The return type is the Protocol to enable easy mocking.
    """
    return _workout_store()


def get_training_repo() -> TrainingRepository:
    """
    Get TrainingRepository implementation.

    Returns the process-wide InMemoryTrainingRepository.
    """
    return _training_store()


def get_sound_catalog(
    settings: Settings = Depends(get_settings),
) -> SoundCatalog:
    """
    Get SoundCatalog implementation.

    The catalog is cached per configured base URL.

    Args:
        settings: Application settings (injected)
    """
    return _sound_catalog(settings.sounds_base_url)


# =============================================================================
# Use Case Providers
# =============================================================================


def get_save_workout_use_case(
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
    sound_catalog: SoundCatalog = Depends(get_sound_catalog),
) -> SaveWorkoutUseCase:
    """Get SaveWorkoutUseCase with injected repository and catalog."""
    return SaveWorkoutUseCase(workout_repo=workout_repo, sound_catalog=sound_catalog)


def get_get_workout_use_case(
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
) -> GetWorkoutUseCase:
    """Get GetWorkoutUseCase with injected repository."""
    return GetWorkoutUseCase(workout_repo=workout_repo)


def get_templates_use_case(
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
) -> TemplatesUseCase:
    """Get TemplatesUseCase with injected repository."""
    return TemplatesUseCase(workout_repo=workout_repo)


def get_start_training_use_case(
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
    sound_catalog: SoundCatalog = Depends(get_sound_catalog),
) -> StartTrainingUseCase:
    """Get StartTrainingUseCase with injected repository and catalog."""
    return StartTrainingUseCase(workout_repo=workout_repo, sound_catalog=sound_catalog)


def get_complete_training_use_case(
    training_repo: TrainingRepository = Depends(get_training_repo),
) -> CompleteTrainingUseCase:
    """Get CompleteTrainingUseCase with injected repository."""
    return CompleteTrainingUseCase(training_repo=training_repo)


def get_training_history_use_case(
    training_repo: TrainingRepository = Depends(get_training_repo),
    settings: Settings = Depends(get_settings),
) -> TrainingHistoryUseCase:
    """Get TrainingHistoryUseCase using the configured default limit."""
    return TrainingHistoryUseCase(
        training_repo=training_repo,
        default_limit=settings.training_history_limit,
    )
