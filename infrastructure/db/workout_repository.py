"""
In-memory Workout Repository implementation.

Stores canonical workouts in process memory. Ids for the workout and every
step, subset and exercise are generated here; order indexes are rewritten
from list positions on every write.
"""
import logging
import threading
import uuid
from datetime import datetime, timezone
from typing import Dict, List, Optional

from domain.models import Workout, WorkoutStep, WorkoutSubset

logger = logging.getLogger(__name__)


def _new_id() -> str:
    return uuid.uuid4().hex


def _assign_subset_ids(subset: WorkoutSubset, order: int) -> WorkoutSubset:
    exercises = [
        ex.model_copy(update={"id": _new_id(), "order": idx})
        for idx, ex in enumerate(subset.exercises)
    ]
    return subset.model_copy(
        update={"id": _new_id(), "order": order, "exercises": exercises}
    )


def _assign_step_ids(steps: List[WorkoutStep]) -> List[WorkoutStep]:
    return [
        step.model_copy(
            update={
                "id": _new_id(),
                "order": idx,
                "subsets": [
                    _assign_subset_ids(subset, sub_idx)
                    for sub_idx, subset in enumerate(step.subsets)
                ],
            }
        )
        for idx, step in enumerate(steps)
    ]


def _newest_first(workouts: List[Workout]) -> List[Workout]:
    oldest = datetime.min.replace(tzinfo=timezone.utc)
    ordered = sorted(workouts, key=lambda w: w.created_at or oldest, reverse=True)
    return [w.model_copy(deep=True) for w in ordered]

class InMemoryWorkoutRepository:
    """
    Thread-safe in-memory implementation of WorkoutRepository.

    Replacing a workout's steps gives the new tree fresh ids, the same way
    a relational store would delete and re-insert child rows.
    """

    def __init__(self):
        self._workouts: Dict[str, Workout] = {}
        self._lock = threading.Lock()

    def create(self, workout: Workout) -> Workout:
        """Store a new workout with generated ids."""
        stored = workout.model_copy(
            update={
                "id": _new_id(),
                "created_at": workout.created_at or datetime.now(timezone.utc),
                "steps": _assign_step_ids(workout.steps),
            },
            deep=True,
        )
        with self._lock:
            self._workouts[stored.id] = stored
        logger.debug(f"Stored workout {stored.id} ({len(stored.steps)} steps)")
        return stored

    def update(self, workout: Workout) -> Optional[Workout]:
        """Replace name and steps of an existing workout."""
        with self._lock:
            existing = self._workouts.get(workout.id or "")
            if existing is None:
                return None
            stored = existing.model_copy(
                update={"name": workout.name, "steps": _assign_step_ids(workout.steps)},
                deep=True,
            )
            self._workouts[stored.id] = stored
        return stored

    def get(self, workout_id: str) -> Optional[Workout]:
        """Get a workout by ID."""
        with self._lock:
            workout = self._workouts.get(workout_id)
        return workout.model_copy(deep=True) if workout else None

    def list_by_user(self, user_id: str) -> List[Workout]:
        """List a user's workouts, newest first. Templates are excluded."""
        with self._lock:
            owned = [
                w for w in self._workouts.values()
                if w.user_id == user_id and not w.is_template
            ]
        return _newest_first(owned)

    def list_templates(self) -> List[Workout]:
        """List all templates, newest first."""
        with self._lock:
            templates = [w for w in self._workouts.values() if w.is_template]
        return _newest_first(templates)

    def delete(self, workout_id: str) -> bool:
        """Delete a workout."""
        with self._lock:
            return self._workouts.pop(workout_id, None) is not None
