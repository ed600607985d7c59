"""
Training completion logs.

A finished training is stored as one TrainingLog plus one TrainingStepLog per
card the client reported.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from domain.models.base import CamelModel


class StepTiming(CamelModel):
    """Per-card timing reported by the client on completion."""

    id: str = ""
    name: str = ""
    type: str = ""
    estimated_seconds: int = 0
    elapsed_millis: int = 0


class CompleteTrainingRequest(CamelModel):
    """Payload for logging a finished training."""

    training_id: str = ""
    workout_id: str = ""
    workout_name: str = ""
    user_id: str = ""
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    steps: List[StepTiming] = Field(default_factory=list)


class TrainingStepLog(CamelModel):
    """Stored timing for one card of a completed training."""

    id: str
    training_id: str
    step_order: int
    type: str = ""
    name: str = ""
    estimated_seconds: int = 0
    elapsed_millis: int = 0

    model_config = {"frozen": True}


class TrainingLog(CamelModel):
    """Stored header for a completed training."""

    id: str
    workout_id: str
    workout_name: str = ""
    user_id: str
    started_at: datetime
    completed_at: datetime

    model_config = {"frozen": True}


class TrainingHistoryItem(CamelModel):
    """History entry returned to the client."""

    id: str
    training_id: str
    workout_id: str
    workout_name: str = ""
    user_id: str
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    steps: List[TrainingStepLog] = Field(default_factory=list)
