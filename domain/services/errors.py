"""Domain validation errors."""

from typing import List, Optional


class WorkoutValidationError(Exception):
    """Raised when a workout definition fails validation."""

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.message = message
        self.errors = errors or [message]


class TrainingValidationError(Exception):
    """Raised when a training completion payload is incomplete."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
