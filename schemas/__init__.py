"""Collection and API schemas."""

from schemas.user import User
from schemas.exercise import Exercise
from schemas.api import (
    UserResponse,
    ExerciseResponse,
    LogEntry,
    LogResponse,
)

__all__ = [
    "User",
    "Exercise",
    "UserResponse",
    "ExerciseResponse",
    "LogEntry",
    "LogResponse",
]
