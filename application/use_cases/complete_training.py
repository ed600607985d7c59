"""
CompleteTraining Use Case.

Stores the log and per-card timings of a finished training.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, List, Optional

from application.ports import TrainingRepository
from domain.models import CompleteTrainingRequest, TrainingLog, TrainingStepLog
from domain.services import TrainingValidationError, build_training_log

logger = logging.getLogger(__name__)


@dataclass
class CompleteTrainingResult:
    """Result of logging a completed training."""

    success: bool
    log: Optional[TrainingLog] = None
    steps: List[TrainingStepLog] = field(default_factory=list)
    error: Optional[str] = None
    validation_errors: List[str] = field(default_factory=list)


class CompleteTrainingUseCase:
    """Use case for recording a completed training."""

    def __init__(
        self,
        training_repo: TrainingRepository,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        """
        Args:
            training_repo: Repository for training logs
            clock: Source of "now" for missing timestamps (tests inject one)
        """
        self._training_repo = training_repo
        self._clock = clock

    def execute(self, request: CompleteTrainingRequest) -> CompleteTrainingResult:
        try:
            now = self._clock() if self._clock else None
            log, steps = build_training_log(request, now=now)

            self._training_repo.record(log, steps)

            logger.info(
                "Recorded training %s for user %s (%d steps)",
                log.id,
                log.user_id,
                len(steps),
            )
            return CompleteTrainingResult(success=True, log=log, steps=steps)

        except TrainingValidationError as e:
            logger.warning(f"Training completion rejected: {e}")
            return CompleteTrainingResult(
                success=False,
                error=e.message,
                validation_errors=[e.message],
            )

        except Exception as e:
            logger.exception(f"CompleteTraining use case failed: {e}")
            return CompleteTrainingResult(success=False, error=str(e))
