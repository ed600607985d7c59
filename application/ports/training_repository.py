"""
Training Repository Interface (Port).

Stores completed training logs and their per-card timings.
"""
from typing import List, Protocol, Sequence

from domain.models import TrainingLog, TrainingStepLog


class TrainingRepository(Protocol):
    """Abstract interface for training log persistence."""

    def record(self, log: TrainingLog, steps: Sequence[TrainingStepLog]) -> None:
        """
        Persist a training log and its step timings.

        Recording the same training id again replaces the earlier record.
        """
        ...

    def history(self, user_id: str, limit: int) -> List[TrainingLog]:
        """
        Get the most recent training logs for a user.

        Returns:
            Logs ordered by completion time, newest first
        """
        ...

    def step_timings(self, training_id: str) -> List[TrainingStepLog]:
        """
        Get stored step timings for one training, in step order.
        """
        ...
