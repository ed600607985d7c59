"""
Fake Repository Implementations for Testing.

This package provides in-memory fake implementations of the application
ports for fast, isolated testing. No external dependencies required.

Features:
- All fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Supports reset() for test isolation
- Factory functions for common test scenarios

Usage:
    from tests.fakes import FakeWorkoutRepository, create_workout_repo

    # Direct instantiation
    repo = FakeWorkoutRepository()

    # Factory function with pre-populated data
    repo = create_workout_repo(user_id="user1", num_workouts=3)
"""
from domain.models import StepType, Workout, WorkoutStep

# Import all fake implementations
from tests.fakes.workout_repository import FakeWorkoutRepository
from tests.fakes.training_repository import FakeTrainingRepository
from tests.fakes.sound_catalog import FakeSoundCatalog


# =============================================================================
# Factory Functions
# =============================================================================


def create_workout_repo(
    *,
    user_id: str = "test_user",
    num_workouts: int = 0,
) -> FakeWorkoutRepository:
    """
    Create a FakeWorkoutRepository with optional pre-populated workouts.

    Each generated workout holds a single 30 second pause step.

    Args:
        user_id: User ID for generated workouts
        num_workouts: Number of sample workouts to create

    Returns:
        Pre-populated FakeWorkoutRepository
    """
    repo = FakeWorkoutRepository()
    for i in range(num_workouts):
        repo.create(
            Workout(
                user_id=user_id,
                name=f"Test Workout {i + 1}",
                steps=[WorkoutStep(type=StepType.PAUSE, name="Warmup", estimated_seconds=30)],
            )
        )
    return repo


__all__ = [
    # Fake implementations
    "FakeWorkoutRepository",
    "FakeTrainingRepository",
    "FakeSoundCatalog",
    # Factory functions
    "create_workout_repo",
]
