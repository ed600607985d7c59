"""
Get Workout Use Case.

This use case handles retrieving, listing, exporting and deleting stored
workouts.
"""
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from application.ports import WorkoutRepository
from domain.models import Workout

logger = logging.getLogger(__name__)


@dataclass
class GetWorkoutResult:
    """Result of getting a single workout."""
    success: bool
    workout: Optional[Workout] = None
    error: Optional[str] = None
    not_found: bool = False


@dataclass
class ListWorkoutsResult:
    """Result of listing workouts."""
    success: bool
    workouts: List[Workout] = field(default_factory=list)
    count: int = 0
    error: Optional[str] = None
    validation_errors: List[str] = field(default_factory=list)


@dataclass
class DeleteWorkoutResult:
    """Result of deleting a workout."""
    success: bool
    error: Optional[str] = None
    not_found: bool = False


class GetWorkoutUseCase:
    """
    Use case for retrieving workouts.

    Exports are the stored canonical tree as-is, so `export_workout` shares
    the lookup with `get_workout`.
    """

    def __init__(self, workout_repo: WorkoutRepository):
        """
        Initialize with required dependencies.

        Args:
            workout_repo: Repository for workout persistence
        """
        self._workout_repo = workout_repo

    def get_workout(self, workout_id: str) -> GetWorkoutResult:
        """
        Get a single workout by ID.

        Returns:
            GetWorkoutResult with the workout or a not-found error
        """
        workout_id = (workout_id or "").strip()
        workout = self._workout_repo.get(workout_id) if workout_id else None

        if workout:
            return GetWorkoutResult(success=True, workout=workout)
        return GetWorkoutResult(
            success=False,
            error="Workout not found",
            not_found=True,
        )

    def export_workout(self, workout_id: str) -> GetWorkoutResult:
        """Get a workout in its portable export form."""
        result = self.get_workout(workout_id)
        if result.success:
            logger.info(f"Exporting workout: {result.workout.id}")
        return result

    def list_workouts(self, user_id: str) -> ListWorkoutsResult:
        """
        List workouts owned by a user.

        Args:
            user_id: Owner ID (required)

        Returns:
            ListWorkoutsResult with workout list
        """
        user_id = (user_id or "").strip()
        if not user_id:
            return ListWorkoutsResult(
                success=False,
                error="userId is required",
                validation_errors=["userId is required"],
            )

        workouts = self._workout_repo.list_by_user(user_id)
        return ListWorkoutsResult(
            success=True,
            workouts=workouts,
            count=len(workouts),
        )

    def delete_workout(self, workout_id: str) -> DeleteWorkoutResult:
        """Delete a workout by ID."""
        workout_id = (workout_id or "").strip()
        if workout_id and self._workout_repo.delete(workout_id):
            logger.info(f"Deleted workout: {workout_id}")
            return DeleteWorkoutResult(success=True)
        return DeleteWorkoutResult(
            success=False,
            error="Workout not found",
            not_found=True,
        )
