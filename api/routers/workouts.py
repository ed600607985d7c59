"""
Workouts router for workout definition CRUD, export and import.

This router contains endpoints for:
- /workouts - Create workout, list a user's workouts
- /workouts/import - Store an exported workout as a new one
- /workouts/{workout_id} - Get, replace, delete workout
- /workouts/{workout_id}/export - Portable export of a workout

All bodies and responses use camelCase field names.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Query
from pydantic import Field

from api.deps import get_get_workout_use_case, get_save_workout_use_case
from api.errors import raise_for_result
from application.use_cases import GetWorkoutUseCase, SaveWorkoutUseCase
from domain.models import Workout, WorkoutRequest
from domain.models.base import CamelModel

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Workouts"],
)


# =============================================================================
# Request/Response Models
# =============================================================================


class ImportWorkoutRequest(CamelModel):
    """
    Request for importing an exported workout.

    The export is read with the lenient editor shape: a missing name comes
    back from the use case as a 400 and out-of-range repeat settings are
    clamped by the normalizer.
    """
    user_id: str = ""
    workout: WorkoutRequest = Field(default_factory=WorkoutRequest)


# =============================================================================
# Workout Endpoints
# =============================================================================


@router.post("/workouts", response_model=Workout)
def create_workout_endpoint(
    request: WorkoutRequest,
    save_workout_use_case: SaveWorkoutUseCase = Depends(get_save_workout_use_case),
):
    """Create a workout from raw steps.

    Delegates validation and normalization to SaveWorkoutUseCase.
    """
    result = save_workout_use_case.execute_create(request)
    raise_for_result(result)
    return result.workout


@router.get("/workouts", response_model=List[Workout])
def list_workouts_endpoint(
    user_id: str = Query("", alias="userId", description="Owner of the workouts"),
    get_workout_use_case: GetWorkoutUseCase = Depends(get_get_workout_use_case),
):
    """List workouts owned by a user, newest first."""
    result = get_workout_use_case.list_workouts(user_id)
    raise_for_result(result)
    return result.workouts


@router.post("/workouts/import", response_model=Workout)
def import_workout_endpoint(
    request: ImportWorkoutRequest,
    save_workout_use_case: SaveWorkoutUseCase = Depends(get_save_workout_use_case),
):
    """Import an exported workout for a user; ids are regenerated."""
    result = save_workout_use_case.execute_import(request.user_id, request.workout)
    raise_for_result(result)
    return result.workout


@router.get("/workouts/{workout_id}", response_model=Workout)
def get_workout_endpoint(
    workout_id: str,
    get_workout_use_case: GetWorkoutUseCase = Depends(get_get_workout_use_case),
):
    """Get a single workout with its full step tree."""
    result = get_workout_use_case.get_workout(workout_id)
    raise_for_result(result)
    return result.workout


@router.put("/workouts/{workout_id}", response_model=Workout)
def update_workout_endpoint(
    workout_id: str,
    request: WorkoutRequest,
    save_workout_use_case: SaveWorkoutUseCase = Depends(get_save_workout_use_case),
):
    """Replace the name and steps of a workout."""
    result = save_workout_use_case.execute_update(workout_id, request)
    raise_for_result(result)
    return result.workout


@router.delete("/workouts/{workout_id}")
def delete_workout_endpoint(
    workout_id: str,
    get_workout_use_case: GetWorkoutUseCase = Depends(get_get_workout_use_case),
):
    """Delete a workout."""
    result = get_workout_use_case.delete_workout(workout_id)
    raise_for_result(result)
    return {"success": True, "workoutId": workout_id}


@router.get("/workouts/{workout_id}/export", response_model=Workout)
def export_workout_endpoint(
    workout_id: str,
    get_workout_use_case: GetWorkoutUseCase = Depends(get_get_workout_use_case),
):
    """Export a workout in the form accepted by /workouts/import."""
    result = get_workout_use_case.export_workout(workout_id)
    raise_for_result(result)
    return result.workout
