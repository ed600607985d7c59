"""
Workout Repository Interface (Port).

This module defines the abstract interface for workout persistence operations.
Implementations may use a database, in-memory storage, or other backends.
The repository stores canonical workout trees verbatim.
"""
from typing import List, Optional, Protocol

from domain.models import Workout


class WorkoutRepository(Protocol):
    """
    Abstract interface for workout persistence operations.

    Domain types are used instead of database-specific types to maintain
    clean architecture boundaries.
    """

    def create(self, workout: Workout) -> Workout:
        """
        Store a new workout.

        The repository assigns the workout id and ids for every step, subset
        and exercise, and sets order indexes from list positions.

        Args:
            workout: Canonical workout without ids

        Returns:
            The stored workout with ids populated
        """
        ...

    def update(self, workout: Workout) -> Optional[Workout]:
        """
        Replace an existing workout's name and steps.

        Args:
            workout: Canonical workout carrying the id to replace

        Returns:
            The stored workout, or None if no workout has that id
        """
        ...

    def get(self, workout_id: str) -> Optional[Workout]:
        """
        Get a workout with its full step tree.

        Returns:
            Workout or None if not found
        """
        ...

    def list_by_user(self, user_id: str) -> List[Workout]:
        """
        List workouts owned by a user, newest first.

        Templates are shared and never appear in a user's list.
        """
        ...

    def list_templates(self) -> List[Workout]:
        """
        List all workouts flagged as templates, newest first.
        """
        ...

    def delete(self, workout_id: str) -> bool:
        """
        Delete a workout.

        Returns:
            True if deleted, False if not found
        """
        ...
