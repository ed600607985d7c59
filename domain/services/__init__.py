"""
Pure domain services.

- normalizer: raw steps -> canonical workout tree
- expander: canonical workout -> ordered runtime cards
- durations: duration parsing and per-exercise timing
- card_ids: deterministic card identifiers
- training_log: completion payload -> stored logs
"""

from domain.services.card_ids import CardPath, format_card_id
from domain.services.durations import (
    DurationFormatError,
    duration_seconds_or_zero,
    parse_duration,
    resolve_exercise_duration,
)
from domain.services.errors import TrainingValidationError, WorkoutValidationError
from domain.services.expander import expand_step, expand_workout
from domain.services.normalizer import normalize_repeat_rest, normalize_steps
from domain.services.training_log import build_history_items, build_training_log

__all__ = [
    "CardPath",
    "format_card_id",
    "DurationFormatError",
    "duration_seconds_or_zero",
    "parse_duration",
    "resolve_exercise_duration",
    "TrainingValidationError",
    "WorkoutValidationError",
    "expand_step",
    "expand_workout",
    "normalize_repeat_rest",
    "normalize_steps",
    "build_history_items",
    "build_training_log",
]
