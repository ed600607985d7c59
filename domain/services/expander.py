"""
Timeline expander: flattens a canonical workout into playable cards.

Steps are processed in stored order. Each step is looped `repeat_count`
times; set steps emit one card per superset subset or one card per exercise
otherwise, and an optional repeat rest card follows each iteration.

The expander is a pure function of (workout, sound resolver). It never
mutates its input.
"""

from typing import Callable, List, Optional

from domain.models.card import Card, CardExercise
from domain.models.workout import (
    PauseOptions,
    StepType,
    SubsetExercise,
    Workout,
    WorkoutStep,
    WorkoutSubset,
)
from domain.services.card_ids import CardPath, format_card_id, iteration_path, rest_path
from domain.services.durations import resolve_exercise_duration

SoundUrlResolver = Callable[[str], str]

REST_CARD_NAME = "Pause"


def to_card_exercise(exercise: SubsetExercise) -> CardExercise:
    """Build the exercise view shown on a card."""
    return CardExercise(
        name=exercise.name,
        type=exercise.type,
        reps=exercise.reps,
        weight=exercise.weight,
        duration=exercise.duration,
        sound_key=exercise.sound_key,
    )


class _Timeline:
    """Card accumulator that marks the first appended card as current."""

    def __init__(self) -> None:
        self.cards: List[Card] = []

    def append(self, card: Card) -> None:
        self.cards.append(card.model_copy(update={"current": not self.cards}))


def _loop_fields(step: WorkoutStep, loop_index: int) -> dict:
    if not step.repeats:
        return {}
    return {"loop_index": loop_index + 1, "loop_total": step.repeat_count}


def _pause_card(
    step: WorkoutStep, path: CardPath, loop_index: int, resolve: SoundUrlResolver
) -> Card:
    return Card(
        id=format_card_id(path),
        name=step.name,
        type=StepType.PAUSE,
        estimated_seconds=step.estimated_seconds,
        sound_url=resolve(step.sound_key),
        sound_key=step.sound_key,
        pause_options=PauseOptions(auto_advance=step.pause_options.auto_advance),
        set_name=step.name,
        **_loop_fields(step, loop_index),
    )


def _subset_cards(
    step: WorkoutStep,
    subset: WorkoutSubset,
    path: CardPath,
    loop_index: int,
    resolve: SoundUrlResolver,
) -> List[Card]:
    shared = dict(
        type=step.type,
        sound_url=resolve(subset.sound_key),
        sound_key=subset.sound_key,
        subset_id=subset.id,
        subset_label=subset.name.strip(),
        has_multiple_subsets=step.has_multiple_subsets,
        set_name=step.name,
        subset_estimated_seconds=subset.estimated_seconds,
        **_loop_fields(step, loop_index),
    )

    if subset.superset:
        return [
            Card(
                id=format_card_id(path),
                name=subset.name,
                estimated_seconds=subset.estimated_seconds,
                exercises=[to_card_exercise(ex) for ex in subset.exercises],
                superset=True,
                **shared,
            )
        ]

    cards = []
    for ex_idx, exercise in enumerate(subset.exercises):
        seconds, auto_advance = resolve_exercise_duration(exercise, subset)
        cards.append(
            Card(
                id=format_card_id(path.at_exercise(ex_idx + 1)),
                name=exercise.name,
                estimated_seconds=seconds,
                exercises=[to_card_exercise(exercise)],
                auto_advance=auto_advance,
                **shared,
            )
        )
    return cards


def _rest_card(
    step: WorkoutStep, loop_index: int, resolve: SoundUrlResolver
) -> Optional[Card]:
    if step.repeat_rest_seconds <= 0:
        return None
    is_last = loop_index == step.repeat_count - 1
    if is_last and not step.repeat_rest_after_last:
        return None
    return Card(
        id=format_card_id(rest_path(step.id, loop_index)),
        name=REST_CARD_NAME,
        type=StepType.PAUSE,
        estimated_seconds=step.repeat_rest_seconds,
        sound_url=resolve(step.repeat_rest_sound_key),
        sound_key=step.repeat_rest_sound_key,
        pause_options=PauseOptions(auto_advance=step.repeat_rest_auto_advance),
        set_name=REST_CARD_NAME,
        **_loop_fields(step, loop_index),
    )


def expand_step(step: WorkoutStep, resolve: SoundUrlResolver) -> List[Card]:
    """Expand a single step (all iterations and rests) into cards."""
    cards: List[Card] = []
    repeat_count = max(step.repeat_count, 1)
    for loop_index in range(repeat_count):
        base = iteration_path(step.id, loop_index, repeat_count)

        if step.is_pause:
            cards.append(_pause_card(step, base, loop_index, resolve))
        else:
            for sub_idx, subset in enumerate(step.subsets):
                cards.extend(
                    _subset_cards(step, subset, base.at_subset(sub_idx + 1), loop_index, resolve)
                )

        rest = _rest_card(step, loop_index, resolve)
        if rest is not None:
            cards.append(rest)
    return cards


def expand_workout(workout: Workout, resolve_sound_url: SoundUrlResolver) -> List[Card]:
    """
    Flatten a canonical workout into an ordered card list.

    Args:
        workout: Stored, already-normalized workout
        resolve_sound_url: Maps a sound key to a playable URL ("" for none)

    Returns:
        Cards in play order; only the first has `current=True`.
    """
    timeline = _Timeline()
    for step in workout.steps:
        for card in expand_step(step, resolve_sound_url):
            timeline.append(card)
    return timeline.cards
