"""
Runtime cards produced by the timeline expander.

Cards are ephemeral: they are built fresh for every training start and
never persisted. The client drives its own timer over them and posts back
elapsed timings when the training completes.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from domain.models.base import CamelModel
from domain.models.workout import ExerciseType, PauseOptions, StepType


class CardExercise(CamelModel):
    """Exercise view shown on a card."""

    name: str = ""
    type: ExerciseType = ExerciseType.REP
    reps: str = ""
    weight: str = ""
    duration: str = ""
    sound_key: str = ""


class Card(CamelModel):
    """
    One playable unit in a training timeline.

    `loop_index`/`loop_total` are only set when the owning step repeats.
    `current` is true for the first card of an expansion only.
    """

    id: str
    name: str = ""
    type: StepType
    estimated_seconds: int = 0
    sound_url: str = ""
    sound_key: str = ""
    subset_estimated_seconds: int = 0

    # Client-owned runtime state
    running: bool = False
    completed: bool = False
    current: bool = False
    elapsed_millis: int = 0

    exercises: List[CardExercise] = Field(default_factory=list)
    pause_options: PauseOptions = Field(default_factory=PauseOptions)
    auto_advance: bool = False
    loop_index: Optional[int] = None
    loop_total: Optional[int] = None
    subset_id: str = ""
    superset: bool = False
    subset_label: str = ""
    has_multiple_subsets: bool = False
    set_name: str = ""


class TrainingState(CamelModel):
    """Runtime state the client consumes for an active training."""

    training_id: str
    workout_id: str
    user_id: str = ""
    workout_name: str = ""
    current_index: int = 0
    running: bool = False
    done: bool = False
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    steps: List[Card] = Field(default_factory=list)

    @property
    def total_estimated_seconds(self) -> int:
        return sum(card.estimated_seconds for card in self.steps)
