"""
SaveWorkout Use Case.

Orchestrates workout persistence with validation, handling create (new
workout), update (replace the steps of an existing workout) and import
(store an exported workout as a new one) operations.

Every write runs the step normalizer, so only canonical trees reach the
repository.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Union

from application.ports import SoundCatalog, WorkoutRepository
from domain.models import (
    ExerciseInput,
    StepInput,
    SubsetInput,
    Workout,
    WorkoutRequest,
    WorkoutStep,
)
from domain.services import WorkoutValidationError, normalize_steps

logger = logging.getLogger(__name__)


@dataclass
class SaveWorkoutResult:
    """Result of the SaveWorkout use case execution."""

    success: bool
    workout: Optional[Workout] = None
    workout_id: Optional[str] = None
    is_update: bool = False
    error: Optional[str] = None
    validation_errors: List[str] = field(default_factory=list)
    not_found: bool = False


def workout_to_step_inputs(workout: Workout) -> List[StepInput]:
    """
    Turn a stored workout back into raw step inputs.

    Ids and exercise catalog references are dropped. Durations are carried
    through `estimated_seconds` so the normalizer reproduces the same values.
    """
    return [_step_to_input(step) for step in workout.steps]


def _step_to_input(step: WorkoutStep) -> StepInput:
    return StepInput(
        type=step.type.value,
        name=step.name,
        estimated_seconds=step.estimated_seconds,
        sound_key=step.sound_key,
        pause_options=step.pause_options,
        repeat_count=step.repeat_count,
        repeat_rest_seconds=step.repeat_rest_seconds,
        repeat_rest_after_last=step.repeat_rest_after_last,
        repeat_rest_sound_key=step.repeat_rest_sound_key,
        repeat_rest_auto_advance=step.repeat_rest_auto_advance,
        subsets=[
            SubsetInput(
                name=subset.name,
                estimated_seconds=subset.estimated_seconds,
                sound_key=subset.sound_key,
                superset=subset.superset,
                exercises=[
                    ExerciseInput(
                        name=ex.name,
                        type=ex.type.value,
                        reps=ex.reps,
                        weight=ex.weight,
                        duration=ex.duration,
                        sound_key=ex.sound_key,
                    )
                    for ex in subset.exercises
                ],
            )
            for subset in step.subsets
        ],
    )


def strip_catalog_references(steps: List[StepInput]) -> List[StepInput]:
    """Copy raw steps with every exercise catalog reference cleared."""
    return [
        step.model_copy(
            update={
                "subsets": [
                    subset.model_copy(
                        update={
                            "exercises": [
                                ex.model_copy(update={"exercise_id": ""})
                                for ex in subset.exercises
                            ]
                        }
                    )
                    for subset in step.subsets
                ]
            }
        )
        for step in steps
    ]

class SaveWorkoutUseCase:
    """
    Use case for saving workouts with validation.

    Orchestrates the following workflow:
    1. Validate required request fields (user, name, steps)
    2. Normalize steps into the canonical tree
    3. Persist via repository (ids and orders are assigned there)
    4. Return the stored workout

    Dependencies are injected via constructor for testability.

    Usage:
        >>> use_case = SaveWorkoutUseCase(
        ...     workout_repo=workout_repo,
        ...     sound_catalog=sound_catalog,
        ... )
        >>> result = use_case.execute_create(request)
        >>> if result.success:
        ...     print(f"Saved workout: {result.workout_id}")
    """

    def __init__(
        self,
        workout_repo: WorkoutRepository,
        sound_catalog: SoundCatalog,
    ) -> None:
        """
        Initialize the use case with required dependencies.

        Args:
            workout_repo: Repository for persisting workouts
            sound_catalog: Catalog used to validate sound keys
        """
        self._workout_repo = workout_repo
        self._sound_catalog = sound_catalog

    def execute_create(self, request: WorkoutRequest) -> SaveWorkoutResult:
        """
        Create a new workout from a raw request.

        Returns:
            SaveWorkoutResult with the stored workout and its new ID
        """
        try:
            user_id = request.user_id.strip()
            name = request.name.strip()
            if not user_id:
                raise WorkoutValidationError("userId is required")
            if not name:
                raise WorkoutValidationError("name is required")

            steps = normalize_steps(request.steps, self._sound_catalog.is_valid_key)

            logger.info(f"Saving workout (create): {name}")
            saved = self._workout_repo.create(
                Workout(user_id=user_id, name=name, steps=steps)
            )

            logger.info(f"Workout saved successfully: {saved.id}")
            return SaveWorkoutResult(
                success=True,
                workout=saved,
                workout_id=saved.id,
            )

        except WorkoutValidationError as e:
            logger.warning(f"Workout validation error: {e}")
            return SaveWorkoutResult(
                success=False,
                error=e.message,
                validation_errors=e.errors,
            )

        except Exception as e:
            logger.exception(f"SaveWorkout create failed: {e}")
            return SaveWorkoutResult(
                success=False,
                error=str(e),
            )

    def execute_update(self, workout_id: str, request: WorkoutRequest) -> SaveWorkoutResult:
        """
        Replace the name and steps of an existing workout.

        Args:
            workout_id: ID of the workout to update
            request: New name and raw steps

        Returns:
            SaveWorkoutResult; `not_found` is set for unknown IDs
        """
        try:
            workout_id = (workout_id or "").strip()
            name = request.name.strip()
            if not workout_id:
                raise WorkoutValidationError("workout id is required")
            if not name:
                raise WorkoutValidationError("name is required")

            steps = normalize_steps(request.steps, self._sound_catalog.is_valid_key)

            existing = self._workout_repo.get(workout_id)
            if existing is None:
                return SaveWorkoutResult(
                    success=False,
                    is_update=True,
                    error="Workout not found",
                    not_found=True,
                )

            logger.info(f"Saving workout (update): {workout_id}")
            saved = self._workout_repo.update(
                existing.model_copy(update={"name": name, "steps": steps})
            )
            if saved is None:
                return SaveWorkoutResult(
                    success=False,
                    is_update=True,
                    error="Workout not found",
                    not_found=True,
                )

            return SaveWorkoutResult(
                success=True,
                workout=saved,
                workout_id=saved.id,
                is_update=True,
            )

        except WorkoutValidationError as e:
            logger.warning(f"Workout validation error: {e}")
            return SaveWorkoutResult(
                success=False,
                is_update=True,
                error=e.message,
                validation_errors=e.errors,
            )

        except Exception as e:
            logger.exception(f"SaveWorkout update failed: {e}")
            return SaveWorkoutResult(
                success=False,
                is_update=True,
                error=str(e),
            )

    def execute_import(
        self, user_id: str, workout: Union[Workout, WorkoutRequest]
    ) -> SaveWorkoutResult:
        """
        Store an exported workout as a new workout owned by `user_id`.

        `workout` is either a stored `Workout` or an export document parsed
        leniently as a `WorkoutRequest` (ids, orders and the exporter's
        userId are ignored). The imported tree is re-normalized, so unknown
        sound keys or broken durations in hand-edited exports are rejected.
        """
        try:
            user_id = (user_id or "").strip()
            name = (workout.name or "").strip()
            if not user_id:
                raise WorkoutValidationError("userId is required")
            if not name:
                raise WorkoutValidationError("name is required")
            if not workout.steps:
                raise WorkoutValidationError("at least one step is required")

            if isinstance(workout, Workout):
                inputs = workout_to_step_inputs(workout)
            else:
                inputs = strip_catalog_references(workout.steps)
            steps = normalize_steps(inputs, self._sound_catalog.is_valid_key)

            logger.info(f"Importing workout: {name}")
            saved = self._workout_repo.create(
                Workout(user_id=user_id, name=name, steps=steps)
            )
            return SaveWorkoutResult(
                success=True,
                workout=saved,
                workout_id=saved.id,
            )

        except WorkoutValidationError as e:
            logger.warning(f"Workout import rejected: {e}")
            return SaveWorkoutResult(
                success=False,
                error=e.message,
                validation_errors=e.errors,
            )

        except Exception as e:
            logger.exception(f"SaveWorkout import failed: {e}")
            return SaveWorkoutResult(
                success=False,
                error=str(e),
            )
