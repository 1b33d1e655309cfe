"""
Domain exceptions for the exercise tracker.

Raised by validation and the request handlers, and rendered as
``{"error": message}`` JSON responses by the API layer.
"""


class ExerciseTrackerError(Exception):
    """Base exception carrying the HTTP status it maps to."""

    status_code = 400

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)


class ValidationError(ExerciseTrackerError):
    """Raised when a required field is missing or malformed."""

    status_code = 400


class NotFoundError(ExerciseTrackerError):
    """Raised when a referenced record does not exist."""

    status_code = 404


class PersistenceError(ExerciseTrackerError):
    """Raised when the database call fails unexpectedly."""

    status_code = 400
