"""
TrainingHistory Use Case.

Reads back completed trainings with their step timings.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from application.ports import TrainingRepository
from domain.models import TrainingHistoryItem, TrainingStepLog
from domain.services import build_history_items

logger = logging.getLogger(__name__)


@dataclass
class TrainingHistoryResult:
    """Result of a history lookup."""

    success: bool
    items: List[TrainingHistoryItem] = field(default_factory=list)
    error: Optional[str] = None
    validation_errors: List[str] = field(default_factory=list)


@dataclass
class StepTimingsResult:
    """Result of a step timings lookup for one training."""

    success: bool
    steps: List[TrainingStepLog] = field(default_factory=list)
    error: Optional[str] = None
    validation_errors: List[str] = field(default_factory=list)


class TrainingHistoryUseCase:
    """
    Use case for training history.

    Args:
        training_repo: Repository for training logs
        default_limit: Number of logs returned when the caller gives none
    """

    def __init__(self, training_repo: TrainingRepository, default_limit: int = 25) -> None:
        self._training_repo = training_repo
        self._default_limit = default_limit

    def history(self, user_id: str, limit: Optional[int] = None) -> TrainingHistoryResult:
        """Newest trainings for a user, each with its step timings."""
        user_id = (user_id or "").strip()
        if not user_id:
            return TrainingHistoryResult(
                success=False,
                error="userId is required",
                validation_errors=["userId is required"],
            )

        if limit is None or limit <= 0:
            limit = self._default_limit

        try:
            logs = self._training_repo.history(user_id, limit)
            step_map = {log.id: self._training_repo.step_timings(log.id) for log in logs}
            return TrainingHistoryResult(
                success=True,
                items=build_history_items(logs, step_map),
            )
        except Exception as e:
            logger.exception(f"Training history lookup failed: {e}")
            return TrainingHistoryResult(success=False, error=str(e))

    def step_timings(self, training_id: str) -> StepTimingsResult:
        """Stored step timings of one training."""
        training_id = (training_id or "").strip()
        if not training_id:
            return StepTimingsResult(
                success=False,
                error="trainingId is required",
                validation_errors=["trainingId is required"],
            )

        try:
            return StepTimingsResult(
                success=True,
                steps=self._training_repo.step_timings(training_id),
            )
        except Exception as e:
            logger.exception(f"Step timings lookup failed: {e}")
            return StepTimingsResult(success=False, error=str(e))
