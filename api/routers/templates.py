"""
Templates router for shared workout templates.

This router contains endpoints for:
- /templates - List templates, create a template from a workout
- /templates/{template_id} - Get a template
- /templates/{template_id}/apply - Clone a template into a user's workout
"""

import logging
from typing import List

from fastapi import APIRouter, Depends

from api.deps import get_templates_use_case
from api.errors import raise_for_result
from application.use_cases import TemplatesUseCase
from domain.models import Workout
from domain.models.base import CamelModel

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Templates"],
)


# =============================================================================
# Request/Response Models
# =============================================================================


class CreateTemplateRequest(CamelModel):
    """Request for turning a workout into a template."""
    workout_id: str = ""
    name: str = ""


class ApplyTemplateRequest(CamelModel):
    """Request for cloning a template into a user's workout."""
    user_id: str = ""
    name: str = ""


# =============================================================================
# Template Endpoints
# =============================================================================


@router.get("/templates", response_model=List[Workout])
def list_templates_endpoint(
    templates_use_case: TemplatesUseCase = Depends(get_templates_use_case),
):
    """List all shared templates, newest first."""
    result = templates_use_case.list_templates()
    return result.templates


@router.post("/templates", response_model=Workout, status_code=201)
def create_template_endpoint(
    request: CreateTemplateRequest,
    templates_use_case: TemplatesUseCase = Depends(get_templates_use_case),
):
    """Clone a workout into a new template; a blank name keeps the workout's name."""
    result = templates_use_case.create_template(request.workout_id, request.name)
    raise_for_result(result)
    return result.workout


@router.get("/templates/{template_id}", response_model=Workout)
def get_template_endpoint(
    template_id: str,
    templates_use_case: TemplatesUseCase = Depends(get_templates_use_case),
):
    """Get a template with its full step tree."""
    result = templates_use_case.get_template(template_id)
    raise_for_result(result)
    return result.workout


@router.post("/templates/{template_id}/apply", response_model=Workout, status_code=201)
def apply_template_endpoint(
    template_id: str,
    request: ApplyTemplateRequest,
    templates_use_case: TemplatesUseCase = Depends(get_templates_use_case),
):
    """Create a new workout for a user from a template."""
    result = templates_use_case.apply_template(template_id, request.user_id, request.name)
    raise_for_result(result)
    return result.workout
