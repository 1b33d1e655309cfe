"""Exercise collection schema."""

from datetime import datetime
from bson import ObjectId
from pydantic import ConfigDict, Field
from schemas.base import TimestampedModel


class Exercise(TimestampedModel):
    """Exercise collection model."""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    user_id: ObjectId = Field(..., serialization_alias="userId", description="Owning user's _id")
    description: str = Field(..., min_length=1, description="What was done")
    duration: int = Field(..., description="Duration in minutes")
    date: datetime = Field(..., description="Calendar date, stored as UTC midnight")
