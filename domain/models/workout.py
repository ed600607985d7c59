"""
Canonical workout tree: Workout -> WorkoutStep -> WorkoutSubset -> SubsetExercise.

This is the validated shape produced by the step normalizer and stored
verbatim by the workout repository. The timeline expander reads it back.
"""

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import Field

from domain.models.base import CamelModel


def normalize_token(value: Optional[str]) -> str:
    """Lowercase and trim a free-text token for comparisons."""
    return (value or "").strip().lower()


class StepType(str, Enum):
    """
    Kinds of workout steps.

    - SET: Timing comes from its subsets/exercises
    - PAUSE: A standalone rest with its own duration
    """

    SET = "set"
    PAUSE = "pause"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["StepType"]:
        """Return the matching step type, or None when the text names neither kind."""
        token = normalize_token(value)
        for member in cls:
            if member.value == token:
                return member
        return None


class ExerciseType(str, Enum):
    """
    Kinds of exercises inside a subset.

    - REP: Counted repetitions, untimed unless the subset provides a duration
    - STOPWATCH: Counts up; duration is optional
    - COUNTDOWN: Counts down from a mandatory duration
    """

    REP = "rep"
    STOPWATCH = "stopwatch"
    COUNTDOWN = "countdown"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["ExerciseType"]:
        """
        Resolve exercise type text.

        Blank text is a rep exercise. Anything that is not one of the three
        kinds returns None so callers can reject it.
        """
        token = normalize_token(value)
        if not token:
            return cls.REP
        for member in cls:
            if member.value == token:
                return member
        return None

    @property
    def is_timed(self) -> bool:
        """Stopwatch and countdown exercises carry a duration."""
        return self in (ExerciseType.STOPWATCH, ExerciseType.COUNTDOWN)


class PauseOptions(CamelModel):
    """Optional behaviour for pause steps."""

    auto_advance: bool = False

    model_config = {"frozen": True}


class SubsetExercise(CamelModel):
    """
    Value object for one exercise row inside a subset.

    `reps` only carries meaning for rep exercises and `duration` only for
    stopwatch/countdown exercises.
    """

    id: str = ""
    order: int = 0
    exercise_id: str = Field(default="", description="Optional catalog reference")
    name: str = ""
    type: ExerciseType = ExerciseType.REP
    reps: str = ""
    weight: str = ""
    duration: str = ""
    sound_key: str = ""

    model_config = {"frozen": True}


class WorkoutSubset(CamelModel):
    """Value object grouping exercises inside a set step."""

    id: str = ""
    order: int = 0
    name: str = ""
    estimated_seconds: int = Field(default=0, ge=0)
    sound_key: str = ""
    superset: bool = False
    exercises: List[SubsetExercise] = Field(default_factory=list)

    model_config = {"frozen": True}

    @property
    def is_solo(self) -> bool:
        """True when the subset holds exactly one exercise."""
        return len(self.exercises) == 1


class WorkoutStep(CamelModel):
    """
    Value object for a top-level step: either a pause or a set of subsets.

    Repeat settings loop the whole step; the optional repeat rest is inserted
    between iterations (and after the last one when requested).
    """

    id: str = ""
    order: int = 0
    type: StepType
    name: str
    estimated_seconds: int = Field(default=0, ge=0)
    sound_key: str = ""
    subsets: List[WorkoutSubset] = Field(default_factory=list)
    pause_options: PauseOptions = Field(default_factory=PauseOptions)
    repeat_count: int = Field(default=1, ge=1)
    repeat_rest_seconds: int = Field(default=0, ge=0)
    repeat_rest_after_last: bool = False
    repeat_rest_sound_key: str = ""
    repeat_rest_auto_advance: bool = False

    model_config = {"frozen": True}

    @property
    def is_pause(self) -> bool:
        return self.type == StepType.PAUSE

    @property
    def repeats(self) -> bool:
        """True when the step loops more than once."""
        return self.repeat_count > 1

    @property
    def has_multiple_subsets(self) -> bool:
        return len(self.subsets) > 1


class Workout(CamelModel):
    """
    Aggregate root for a stored workout definition.

    Owned by the workout repository; domain services only read it or build
    new instances.
    """

    id: Optional[str] = Field(
        default=None,
        description="Unique identifier. None for new, unsaved workouts.",
    )
    user_id: str = ""
    name: str = Field(..., min_length=1)
    is_template: bool = False
    created_at: Optional[datetime] = None
    steps: List[WorkoutStep] = Field(default_factory=list)

    @property
    def total_exercises(self) -> int:
        """Number of exercise rows across all set steps."""
        return sum(len(sub.exercises) for step in self.steps for sub in step.subsets)

    @property
    def is_new(self) -> bool:
        return self.id is None

    def with_id(self, workout_id: str) -> "Workout":
        """Return a copy of this workout with the given ID set."""
        return self.model_copy(update={"id": workout_id})

    def __str__(self) -> str:
        return f'Workout("{self.name}", {len(self.steps)} steps, {self.total_exercises} exercises)'
