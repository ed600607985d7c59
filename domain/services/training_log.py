"""
Training completion: maps a client completion payload to stored logs.
"""

from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional, Sequence, Tuple

from domain.models.training import (
    CompleteTrainingRequest,
    TrainingHistoryItem,
    TrainingLog,
    TrainingStepLog,
)
from domain.services.errors import TrainingValidationError


def _as_utc(value: datetime) -> datetime:
    # Naive timestamps are treated as UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def build_training_log(
    request: CompleteTrainingRequest,
    now: Optional[datetime] = None,
) -> Tuple[TrainingLog, List[TrainingStepLog]]:
    """
    Validate a completion payload and build the log plus step timings.

    Missing timestamps default to `now`. A completion earlier than the start
    is moved to one second after the start. Step entries with neither id nor
    name are skipped, but positions still count the skipped entries.

    Raises:
        TrainingValidationError: If training, workout or user id is missing
    """
    training_id = request.training_id.strip()
    workout_id = request.workout_id.strip()
    user_id = request.user_id.strip()
    if not training_id or not workout_id or not user_id:
        raise TrainingValidationError("trainingId, workoutId, and userId are required")

    now = _as_utc(now or datetime.now(timezone.utc))
    started_at = _as_utc(request.started_at) if request.started_at else now
    completed_at = _as_utc(request.completed_at) if request.completed_at else now
    if completed_at < started_at:
        completed_at = started_at + timedelta(seconds=1)

    step_logs = [
        TrainingStepLog(
            id=f"{training_id}-{idx}",
            training_id=training_id,
            step_order=idx,
            type=step.type.strip(),
            name=step.name.strip(),
            estimated_seconds=step.estimated_seconds,
            elapsed_millis=step.elapsed_millis,
        )
        for idx, step in enumerate(request.steps)
        if step.id or step.name
    ]

    log = TrainingLog(
        id=training_id,
        workout_id=workout_id,
        workout_name=request.workout_name.strip(),
        user_id=user_id,
        started_at=started_at,
        completed_at=completed_at,
    )
    return log, step_logs


def build_history_items(
    history: Sequence[TrainingLog],
    step_map: Dict[str, List[TrainingStepLog]],
) -> List[TrainingHistoryItem]:
    """Map stored logs to history items, attaching step timings by training id."""
    return [
        TrainingHistoryItem(
            id=log.id,
            training_id=log.id,
            workout_id=log.workout_id,
            workout_name=log.workout_name,
            user_id=log.user_id,
            started_at=log.started_at,
            completed_at=log.completed_at,
            steps=step_map.get(log.id, []),
        )
        for log in history
    ]
