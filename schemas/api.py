"""Response schemas for the REST API.

Field names mirror the JSON contract consumers expect, including the
MongoDB-style ``_id`` key.
"""

from typing import List
from pydantic import BaseModel, ConfigDict, Field


class UserResponse(BaseModel):
    """A user reduced to its name and id."""
    model_config = ConfigDict(populate_by_name=True)

    username: str
    id: str = Field(..., alias="_id")


class ExerciseResponse(BaseModel):
    """Created exercise echoed back with its owner.

    ``_id`` holds the user's id, not the exercise's.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id")
    username: str
    date: str = Field(..., description="Formatted as 'Www Mmm dd yyyy'")
    duration: int
    description: str


class LogEntry(BaseModel):
    """Single exercise in a user's log."""
    description: str
    duration: int
    date: str


class LogResponse(BaseModel):
    """A user's filtered exercise log."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id")
    username: str
    count: int
    log: List[LogEntry] = Field(default_factory=list)
