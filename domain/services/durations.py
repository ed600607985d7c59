"""
Duration text parsing and per-exercise timing resolution.

Durations are written as unit-suffixed numbers such as "45s", "1m30s",
"1.5m", "500ms" or "1h". A bare "0" is accepted. Results are whole seconds,
truncated, and never negative.
"""

import re
from decimal import Decimal
from typing import Tuple

from domain.models.workout import ExerciseType, SubsetExercise, WorkoutSubset

_UNIT_SECONDS = {
    "ns": Decimal("0.000000001"),
    "us": Decimal("0.000001"),
    "µs": Decimal("0.000001"),
    "μs": Decimal("0.000001"),
    "ms": Decimal("0.001"),
    "s": Decimal(1),
    "m": Decimal(60),
    "h": Decimal(3600),
}

_COMPONENT = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|μs|ms|s|m|h)", re.ASCII)
_FULL = re.compile(r"[-+]?(?:(?:\d+(?:\.\d*)?|\.\d+)(?:ns|us|µs|μs|ms|s|m|h))+", re.ASCII)

# Largest magnitude a signed 64-bit nanosecond count can hold
_NANOS_PER_SECOND = Decimal(1_000_000_000)
_MAX_NANOS = Decimal(2**63 - 1)
_MAX_NEGATIVE_NANOS = Decimal(2**63)


class DurationFormatError(ValueError):
    """Raised for duration text that cannot be parsed."""


def parse_duration(value: str) -> int:
    """
    Parse duration text to whole seconds.

    Args:
        value: Text like "90s" or "1m30s". Surrounding whitespace is ignored.

    Returns:
        Seconds, truncated toward zero and clamped to >= 0.

    Raises:
        DurationFormatError: If the text is blank, malformed or out of range.
    """
    text = (value or "").strip()
    if not text:
        raise DurationFormatError("empty duration")
    if text in ("0", "+0", "-0"):
        return 0
    if not _FULL.fullmatch(text):
        raise DurationFormatError(f"invalid duration {text!r}")

    negative = text.startswith("-")
    total = Decimal(0)
    for amount, unit in _COMPONENT.findall(text.lstrip("+-")):
        total += Decimal(amount) * _UNIT_SECONDS[unit]

    limit = _MAX_NEGATIVE_NANOS if negative else _MAX_NANOS
    if total * _NANOS_PER_SECOND > limit:
        raise DurationFormatError(f"duration out of range {text!r}")
    if negative:
        return 0
    return int(total)


def parse_duration_field(value: str, fallback: int = 0) -> int:
    """
    Parse an optional duration field.

    Blank text yields the fallback (clamped to >= 0); anything else must parse.
    """
    if not (value or "").strip():
        return max(fallback, 0)
    return parse_duration(value)


def duration_seconds_or_zero(value: str) -> int:
    """Lenient parse for stored data: malformed or blank text counts as 0."""
    try:
        return parse_duration(value)
    except DurationFormatError:
        return 0


def resolve_exercise_duration(
    exercise: SubsetExercise,
    subset: WorkoutSubset,
) -> Tuple[int, bool]:
    """
    Resolve the timing of one exercise card.

    - Countdown/stopwatch: the exercise duration, falling back to the subset's
      estimated seconds when it is missing or zero. Only countdowns with a
      positive result auto-advance.
    - Rep: the subset's estimated seconds when the exercise is alone in its
      subset, otherwise untimed.

    Returns:
        Tuple of (seconds, auto_advance).
    """
    ex_type = exercise.type

    if ex_type.is_timed:
        seconds = duration_seconds_or_zero(exercise.duration)
        if seconds <= 0 and subset.estimated_seconds > 0:
            seconds = subset.estimated_seconds
        return seconds, ex_type == ExerciseType.COUNTDOWN and seconds > 0

    if subset.is_solo and subset.estimated_seconds > 0:
        return subset.estimated_seconds, False
    return 0, False
