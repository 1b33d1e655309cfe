"""Shared base for collection schemas."""

from datetime import datetime, timezone
from typing import Any
from pydantic import BaseModel, Field, model_validator


def utcnow() -> datetime:
    """Timezone-aware current time for write timestamps."""
    return datetime.now(timezone.utc)


class TimestampedModel(BaseModel):
    """Collection model stamped with ``createdAt``/``updatedAt`` on write.

    Both timestamps default to the same instant.
    """
    created_at: datetime = Field(..., serialization_alias="createdAt")
    updated_at: datetime = Field(..., serialization_alias="updatedAt")

    @model_validator(mode="before")
    @classmethod
    def stamp_timestamps(cls, data: Any) -> Any:
        if isinstance(data, dict):
            data = dict(data)
            data.setdefault("created_at", utcnow())
            data.setdefault("updated_at", data["created_at"])
        return data
