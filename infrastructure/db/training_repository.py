"""
In-memory Training Repository implementation.

Keeps completed training logs and their step timings in process memory.
"""
import threading
from datetime import datetime
from typing import Dict, List, Sequence

from domain.models import TrainingLog, TrainingStepLog


class InMemoryTrainingRepository:
    """Thread-safe in-memory implementation of TrainingRepository."""

    def __init__(self):
        self._logs: Dict[str, TrainingLog] = {}
        self._steps: Dict[str, List[TrainingStepLog]] = {}
        self._lock = threading.Lock()

    def record(self, log: TrainingLog, steps: Sequence[TrainingStepLog]) -> None:
        """Store a log; an existing log with the same id is replaced."""
        with self._lock:
            self._logs[log.id] = log
            self._steps[log.id] = sorted(steps, key=lambda s: s.step_order)

    def history(self, user_id: str, limit: int) -> List[TrainingLog]:
        """Newest logs for a user by completion time."""
        with self._lock:
            logs = [log for log in self._logs.values() if log.user_id == user_id]
        logs.sort(key=_completed_key, reverse=True)
        return logs[:max(limit, 0)]

    def step_timings(self, training_id: str) -> List[TrainingStepLog]:
        """Step timings of one training, in step order."""
        with self._lock:
            return list(self._steps.get(training_id, []))


def _completed_key(log: TrainingLog) -> datetime:
    return log.completed_at
