"""
Step normalizer: validates raw workout steps into the canonical tree.

Validation is fail-fast. The first violation raises WorkoutValidationError
with a message naming the offending step or subset; nothing is returned
partially.
"""

import re
from typing import Callable, List, Optional, Sequence, Tuple

from domain.models.inputs import ExerciseInput, StepInput, SubsetInput
from domain.models.workout import (
    ExerciseType,
    PauseOptions,
    StepType,
    SubsetExercise,
    WorkoutStep,
    WorkoutSubset,
)
from domain.services.durations import DurationFormatError, parse_duration, parse_duration_field
from domain.services.errors import WorkoutValidationError

SoundKeyValidator = Callable[[str], bool]

REP_RANGE_PATTERN = re.compile(r"^\d+(-\d+)?$", re.ASCII)


def normalize_repeat_rest(
    repeat_count: int,
    repeat_rest_seconds: int,
    repeat_rest_auto_advance: bool,
    repeat_rest_after_last: bool,
    repeat_rest_sound_key: str,
) -> Tuple[int, bool, bool, str]:
    """
    Clear repeat rest settings when there is nothing to rest between.

    Returns:
        Tuple of (seconds, auto_advance, after_last, sound_key).
    """
    if repeat_count <= 1 or repeat_rest_seconds == 0:
        return 0, False, False, ""
    return (
        repeat_rest_seconds,
        repeat_rest_auto_advance,
        repeat_rest_after_last,
        repeat_rest_sound_key,
    )


def is_blank_rep_row(exercise: ExerciseInput) -> bool:
    """A rep row with no name, reps or weight is an unfinished editor row."""
    return not (
        exercise.name.strip() or exercise.reps.strip() or exercise.weight.strip()
    )


def _check_sound(
    key: str,
    is_valid_sound_key: Optional[SoundKeyValidator],
    message: str,
) -> None:
    if key and is_valid_sound_key is not None and not is_valid_sound_key(key):
        raise WorkoutValidationError(message)


def normalize_steps(
    inputs: Sequence[StepInput],
    is_valid_sound_key: Optional[SoundKeyValidator] = None,
) -> List[WorkoutStep]:
    """
    Validate and canonicalize raw steps.

    Args:
        inputs: Steps as submitted by the client
        is_valid_sound_key: Predicate for sound keys; None skips sound checks

    Returns:
        Canonical steps ready for persistence (ids left empty, orders set)

    Raises:
        WorkoutValidationError: On the first invalid step, subset or exercise
    """
    if not inputs:
        raise WorkoutValidationError("at least one step is required")

    steps: List[WorkoutStep] = []
    for idx, raw in enumerate(inputs):
        name = raw.name.strip()
        if not raw.type.strip() or not name:
            raise WorkoutValidationError(f"step {idx + 1} requires name and type")

        step_type = StepType.parse(raw.type)
        if step_type is None:
            raise WorkoutValidationError(f"step {idx + 1} has invalid type")

        try:
            duration_seconds = parse_duration_field(raw.duration, raw.estimated_seconds)
        except DurationFormatError as e:
            raise WorkoutValidationError(f"invalid duration for {name}: {e}") from e

        sound_key = raw.sound_key.strip()
        _check_sound(sound_key, is_valid_sound_key, f"invalid sound selection for step {name}")

        rest_sound_key = raw.repeat_rest_sound_key.strip()
        _check_sound(
            rest_sound_key, is_valid_sound_key, f"invalid rest sound selection for step {name}"
        )

        repeat_count = max(raw.repeat_count, 1)
        rest_seconds, rest_auto_advance, rest_after_last, rest_sound_key = normalize_repeat_rest(
            repeat_count,
            max(raw.repeat_rest_seconds, 0),
            raw.repeat_rest_auto_advance,
            raw.repeat_rest_after_last,
            rest_sound_key,
        )

        is_pause = step_type == StepType.PAUSE
        auto_advance = is_pause and raw.pause_options.auto_advance

        steps.append(
            WorkoutStep(
                order=idx,
                type=step_type,
                name=name,
                estimated_seconds=duration_seconds if is_pause else 0,
                sound_key=sound_key,
                subsets=[] if is_pause else normalize_subsets(name, raw.subsets, is_valid_sound_key),
                pause_options=PauseOptions(auto_advance=auto_advance),
                repeat_count=repeat_count,
                repeat_rest_seconds=rest_seconds,
                repeat_rest_after_last=rest_after_last,
                repeat_rest_sound_key=rest_sound_key,
                repeat_rest_auto_advance=rest_auto_advance,
            )
        )
    return steps


def normalize_subsets(
    step_name: str,
    inputs: Sequence[SubsetInput],
    is_valid_sound_key: Optional[SoundKeyValidator] = None,
) -> List[WorkoutSubset]:
    """Normalize the subsets of a set step; at least one is required."""
    if not inputs:
        raise WorkoutValidationError(f"{step_name} requires at least one subset")
    return [
        normalize_subset(step_name, idx, raw, is_valid_sound_key)
        for idx, raw in enumerate(inputs)
    ]


def normalize_subset(
    step_name: str,
    index: int,
    raw: SubsetInput,
    is_valid_sound_key: Optional[SoundKeyValidator] = None,
) -> WorkoutSubset:
    """
    Normalize one subset.

    An empty name is kept empty; the synthetic "subset N of <step>" label only
    appears in error messages.
    """
    name = raw.name.strip()
    label = name or f"subset {index + 1} of {step_name}"

    try:
        seconds = parse_duration_field(raw.duration, raw.estimated_seconds)
    except DurationFormatError as e:
        raise WorkoutValidationError(f"invalid duration for {label}: {e}") from e

    sound_key = raw.sound_key.strip()
    _check_sound(sound_key, is_valid_sound_key, f"invalid sound for {label}")

    return WorkoutSubset(
        order=index,
        name=name,
        estimated_seconds=seconds,
        sound_key=sound_key,
        superset=raw.superset,
        exercises=normalize_exercises(label, raw.exercises, is_valid_sound_key),
    )


def normalize_exercises(
    label: str,
    inputs: Sequence[ExerciseInput],
    is_valid_sound_key: Optional[SoundKeyValidator] = None,
) -> List[SubsetExercise]:
    """
    Normalize the exercise rows of a subset.

    Blank rep rows are dropped. At least one exercise must survive.
    """
    exercises: List[SubsetExercise] = []
    for raw in inputs:
        ex_type = ExerciseType.parse(raw.type)
        if ex_type is None:
            raise WorkoutValidationError(f"invalid exercise type for {label}")

        duration = raw.duration.strip()
        if ex_type == ExerciseType.COUNTDOWN and not duration:
            raise WorkoutValidationError(f"invalid duration for {label}")
        if ex_type.is_timed and duration:
            try:
                parse_duration(duration)
            except DurationFormatError as e:
                raise WorkoutValidationError(f"invalid duration for {label}") from e

        reps = raw.reps.strip()
        if ex_type == ExerciseType.REP:
            if reps and not REP_RANGE_PATTERN.match(reps):
                raise WorkoutValidationError(f"invalid reps for {label}")
            if is_blank_rep_row(raw):
                continue

        sound_key = raw.sound_key.strip()
        _check_sound(sound_key, is_valid_sound_key, f"invalid exercise sound for {label}")

        exercises.append(
            SubsetExercise(
                order=len(exercises),
                exercise_id=raw.exercise_id.strip(),
                name=raw.name.strip(),
                type=ex_type,
                reps=reps if ex_type == ExerciseType.REP else "",
                weight=raw.weight.strip(),
                duration="" if ex_type == ExerciseType.REP else duration,
                sound_key=sound_key,
            )
        )

    if not exercises:
        raise WorkoutValidationError(f"subset {label} requires at least one exercise")
    return exercises
