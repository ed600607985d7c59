"""
StartTraining Use Case.

Loads a stored workout and expands it into the card timeline the client
plays through.
"""

import logging
import uuid
from dataclasses import dataclass, field
from typing import List, Optional

from application.ports import SoundCatalog, WorkoutRepository
from domain.models import TrainingState
from domain.services import expand_workout

logger = logging.getLogger(__name__)


@dataclass
class StartTrainingResult:
    """Result of starting a training."""

    success: bool
    training: Optional[TrainingState] = None
    error: Optional[str] = None
    validation_errors: List[str] = field(default_factory=list)
    not_found: bool = False


def new_training_id() -> str:
    """Random hex identifier for a training run."""
    return uuid.uuid4().hex


class StartTrainingUseCase:
    """
    Use case for starting a training from a stored workout.

    Cards are rebuilt on every start; nothing is persisted until the
    training is completed.
    """

    def __init__(
        self,
        workout_repo: WorkoutRepository,
        sound_catalog: SoundCatalog,
    ) -> None:
        self._workout_repo = workout_repo
        self._sound_catalog = sound_catalog

    def execute(self, workout_id: str) -> StartTrainingResult:
        """
        Build the training state for a workout.

        Args:
            workout_id: ID of the stored workout

        Returns:
            StartTrainingResult with the expanded TrainingState
        """
        workout_id = (workout_id or "").strip()
        if not workout_id:
            return StartTrainingResult(
                success=False,
                error="workoutId is required",
                validation_errors=["workoutId is required"],
            )

        try:
            workout = self._workout_repo.get(workout_id)
            if workout is None:
                return StartTrainingResult(
                    success=False,
                    error="Workout not found",
                    not_found=True,
                )

            cards = expand_workout(workout, self._sound_catalog.url_by_key)
            training = TrainingState(
                training_id=new_training_id(),
                workout_id=workout.id,
                user_id=workout.user_id,
                workout_name=workout.name,
                steps=cards,
            )

            logger.info(
                "Started training %s for workout %s (%d cards)",
                training.training_id,
                workout.id,
                len(cards),
            )
            return StartTrainingResult(success=True, training=training)

        except Exception as e:
            logger.exception(f"StartTraining use case failed: {e}")
            return StartTrainingResult(success=False, error=str(e))
