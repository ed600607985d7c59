"""
Raw client payloads for workout definitions.

These are intentionally lenient: editors submit half-filled rows, nulls and
free text. The step normalizer turns them into the canonical tree.
"""

from typing import Any, List, Optional

from pydantic import Field, field_validator

from domain.models.base import CamelModel
from domain.models.workout import PauseOptions


def _blank_if_none(value: Any) -> Any:
    return "" if value is None else value


class ExerciseInput(CamelModel):
    """One exercise row as submitted by the editor."""

    exercise_id: str = ""
    name: str = ""
    type: str = ""
    reps: str = ""
    weight: str = ""
    duration: str = ""
    sound_key: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def null_to_blank(cls, v: Any) -> Any:
        v = _blank_if_none(v)
        # Reps and weight are often typed as numbers by clients
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v


class SubsetInput(CamelModel):
    """A subset of a set step as submitted by the editor."""

    name: str = ""
    duration: str = ""
    estimated_seconds: int = 0
    sound_key: str = ""
    superset: bool = False
    exercises: List[ExerciseInput] = Field(default_factory=list)

    @field_validator("name", "duration", "sound_key", mode="before")
    @classmethod
    def null_to_blank(cls, v: Any) -> Any:
        return _blank_if_none(v)

    @field_validator("exercises", mode="before")
    @classmethod
    def null_to_empty(cls, v: Any) -> Any:
        return v or []


class StepInput(CamelModel):
    """A top-level step as submitted by the editor."""

    type: str = ""
    name: str = ""
    duration: str = ""
    estimated_seconds: int = 0
    sound_key: str = ""
    subsets: List[SubsetInput] = Field(default_factory=list)
    pause_options: PauseOptions = Field(default_factory=PauseOptions)
    repeat_count: int = 0
    repeat_rest_seconds: int = 0
    repeat_rest_after_last: bool = False
    repeat_rest_sound_key: str = ""
    repeat_rest_auto_advance: bool = False

    @field_validator("type", "name", "duration", "sound_key", "repeat_rest_sound_key", mode="before")
    @classmethod
    def null_to_blank(cls, v: Any) -> Any:
        return _blank_if_none(v)

    @field_validator("subsets", mode="before")
    @classmethod
    def null_to_empty(cls, v: Any) -> Any:
        return v or []

    @field_validator("pause_options", mode="before")
    @classmethod
    def null_to_default(cls, v: Any) -> Any:
        return v if v is not None else PauseOptions()

    @field_validator(
        "estimated_seconds", "repeat_count", "repeat_rest_seconds", mode="before"
    )
    @classmethod
    def null_to_zero(cls, v: Any) -> Any:
        return 0 if v is None else v


class WorkoutRequest(CamelModel):
    """Payload for creating or replacing a workout definition."""

    user_id: str = ""
    name: str = ""
    steps: List[StepInput] = Field(default_factory=list)

    @field_validator("user_id", "name", mode="before")
    @classmethod
    def null_to_blank(cls, v: Any) -> Any:
        return _blank_if_none(v)

    @field_validator("steps", mode="before")
    @classmethod
    def null_to_empty(cls, v: Any) -> Any:
        return v or []
