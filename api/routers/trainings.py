"""
Trainings router.

This router contains endpoints for:
- /trainings - Start a training (expand a workout into cards)
- /trainings/complete - Log a finished training
- /trainings/history - Recent trainings of a user
- /trainings/{training_id}/steps - Step timings of one training

Note: /trainings/history is declared before /trainings/{training_id}/steps so
the literal path is never captured as a training id.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from api.deps import (
    get_complete_training_use_case,
    get_start_training_use_case,
    get_training_history_use_case,
)
from api.errors import raise_for_result
from application.use_cases import (
    CompleteTrainingUseCase,
    StartTrainingUseCase,
    TrainingHistoryUseCase,
)
from domain.models import (
    CompleteTrainingRequest,
    TrainingHistoryItem,
    TrainingLog,
    TrainingState,
    TrainingStepLog,
)
from domain.models.base import CamelModel

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Trainings"],
)


class StartTrainingRequest(CamelModel):
    """Request for starting a training."""
    workout_id: str = ""


@router.post(
    "/trainings",
    response_model=TrainingState,
    response_model_exclude_none=True,
)
def start_training_endpoint(
    request: StartTrainingRequest,
    use_case: StartTrainingUseCase = Depends(get_start_training_use_case),
):
    """Expand a stored workout into a fresh training timeline."""
    result = use_case.execute(request.workout_id)
    raise_for_result(result)
    return result.training


@router.post("/trainings/complete", response_model=TrainingLog)
def complete_training_endpoint(
    request: CompleteTrainingRequest,
    use_case: CompleteTrainingUseCase = Depends(get_complete_training_use_case),
):
    """Store the log and step timings of a finished training."""
    result = use_case.execute(request)
    raise_for_result(result)
    return result.log


@router.get("/trainings/history", response_model=List[TrainingHistoryItem])
def training_history_endpoint(
    user_id: str = Query("", alias="userId"),
    limit: Optional[int] = Query(None, ge=1, le=200, description="Maximum number of trainings"),
    use_case: TrainingHistoryUseCase = Depends(get_training_history_use_case),
):
    """Recent trainings of a user, newest first, with step timings."""
    result = use_case.history(user_id, limit)
    raise_for_result(result)
    return result.items


@router.get("/trainings/{training_id}/steps", response_model=List[TrainingStepLog])
def training_steps_endpoint(
    training_id: str,
    use_case: TrainingHistoryUseCase = Depends(get_training_history_use_case),
):
    """Stored step timings of one training."""
    result = use_case.step_timings(training_id)
    raise_for_result(result)
    return result.steps
