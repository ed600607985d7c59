"""
Templates Use Case.

Templates are shared workouts flagged with `is_template`. A template is
created by cloning an existing workout, and applying a template clones it
back into a new workout owned by a user. Clones get fresh ids from the
repository; the step tree is copied as stored.
"""
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from application.ports import WorkoutRepository
from domain.models import Workout

logger = logging.getLogger(__name__)


@dataclass
class TemplateResult:
    """Result of creating, getting or applying a template."""
    success: bool
    workout: Optional[Workout] = None
    error: Optional[str] = None
    validation_errors: List[str] = field(default_factory=list)
    not_found: bool = False


@dataclass
class ListTemplatesResult:
    """Result of listing templates."""
    success: bool
    templates: List[Workout] = field(default_factory=list)
    count: int = 0
    error: Optional[str] = None


def _invalid(message: str) -> TemplateResult:
    return TemplateResult(success=False, error=message, validation_errors=[message])


class TemplatesUseCase:
    """
    Use case for shared workout templates.

    Only workouts flagged as templates count as templates; looking up a
    regular workout through this use case reports it as not found.
    """

    def __init__(self, workout_repo: WorkoutRepository):
        """
        Initialize with required dependencies.

        Args:
            workout_repo: Repository for workout persistence
        """
        self._workout_repo = workout_repo

    def list_templates(self) -> ListTemplatesResult:
        """List all templates, newest first."""
        templates = self._workout_repo.list_templates()
        return ListTemplatesResult(
            success=True,
            templates=templates,
            count=len(templates),
        )

    def create_template(self, workout_id: str, name: str = "") -> TemplateResult:
        """
        Clone a workout into a new template.

        Args:
            workout_id: Source workout (required)
            name: Template name; blank keeps the source workout's name

        Returns:
            TemplateResult with the stored template in `workout`
        """
        workout_id = (workout_id or "").strip()
        if not workout_id:
            return _invalid("workoutId is required")

        source = self._workout_repo.get(workout_id)
        if source is None:
            return TemplateResult(success=False, error="Workout not found", not_found=True)
        if source.is_template:
            return _invalid("workout is already a template")

        try:
            template = self._workout_repo.create(
                Workout(
                    user_id=source.user_id,
                    name=(name or "").strip() or source.name,
                    is_template=True,
                    steps=source.steps,
                )
            )
        except Exception as e:
            logger.exception(f"Create template failed: {e}")
            return TemplateResult(success=False, error=str(e))

        logger.info(f"Created template {template.id} from workout {workout_id}")
        return TemplateResult(success=True, workout=template)

    def get_template(self, template_id: str) -> TemplateResult:
        """Get a template by ID."""
        template_id = (template_id or "").strip()
        if not template_id:
            return _invalid("template id is required")

        template = self._workout_repo.get(template_id)
        if template is None or not template.is_template:
            return TemplateResult(success=False, error="Template not found", not_found=True)
        return TemplateResult(success=True, workout=template)

    def apply_template(self, template_id: str, user_id: str, name: str = "") -> TemplateResult:
        """
        Clone a template into a new workout owned by `user_id`.

        Args:
            template_id: Template to copy (required)
            user_id: Owner of the new workout (required)
            name: Workout name; blank keeps the template's name

        Returns:
            TemplateResult with the new workout
        """
        user_id = (user_id or "").strip()
        found = self.get_template(template_id)
        if not found.success:
            return found
        if not user_id:
            return _invalid("userId is required")

        template = found.workout
        try:
            workout = self._workout_repo.create(
                Workout(
                    user_id=user_id,
                    name=(name or "").strip() or template.name,
                    steps=template.steps,
                )
            )
        except Exception as e:
            logger.exception(f"Apply template failed: {e}")
            return TemplateResult(success=False, error=str(e))

        logger.info(f"Applied template {template.id} for user {user_id}: {workout.id}")
        return TemplateResult(success=True, workout=workout)
