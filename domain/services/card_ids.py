"""
Deterministic card identifiers.

Every card id is derived from its position in the workout tree:

    <stepId>                       pause step, not repeated
    <stepId>-r<N>                  pause step, iteration N
    <stepId>[-r<N>]-sub-<S>        superset subset S
    <stepId>[-r<N>]-sub-<S>-ex-<E> exercise E of subset S
    <stepId>-rest-<N>              repeat rest after iteration N

All positions are 1-based.
"""

from typing import NamedTuple, Optional


class CardPath(NamedTuple):
    """Typed position of a card inside the expanded timeline."""

    step_id: str
    iteration: Optional[int] = None
    subset: Optional[int] = None
    exercise: Optional[int] = None
    rest_after: Optional[int] = None

    def at_subset(self, subset: int) -> "CardPath":
        return self._replace(subset=subset)

    def at_exercise(self, exercise: int) -> "CardPath":
        return self._replace(exercise=exercise)


def format_card_id(path: CardPath) -> str:
    """Render a card path to its string id."""
    if path.rest_after is not None:
        return f"{path.step_id}-rest-{path.rest_after}"

    card_id = path.step_id
    if path.iteration is not None:
        card_id += f"-r{path.iteration}"
    if path.subset is not None:
        card_id += f"-sub-{path.subset}"
        if path.exercise is not None:
            card_id += f"-ex-{path.exercise}"
    return card_id


def iteration_path(step_id: str, loop_index: int, repeat_count: int) -> CardPath:
    """
    Base path for one iteration of a step.

    The iteration suffix is only present when the step repeats.
    """
    if repeat_count > 1:
        return CardPath(step_id, iteration=loop_index + 1)
    return CardPath(step_id)


def rest_path(step_id: str, loop_index: int) -> CardPath:
    return CardPath(step_id, rest_after=loop_index + 1)
