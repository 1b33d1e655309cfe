"""User collection schema."""

from pydantic import Field
from schemas.base import TimestampedModel


class User(TimestampedModel):
    """User collection model."""
    username: str = Field(..., min_length=1, description="User's chosen name, not unique")
