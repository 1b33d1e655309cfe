"""Validation of incoming request payloads.

Each function checks one entity before anything is written and raises
``ValidationError`` with a message suitable for returning to the client.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping, Optional

from bson import ObjectId

from schemas.exercise import Exercise
from schemas.user import User
from services.exceptions import ValidationError
from utils.helpers import (
    MAX_BSON_INT,
    date_to_datetime,
    parse_calendar_date,
    parse_int,
    today,
)


@dataclass
class LogFilters:
    """Parsed query parameters for a log request."""
    date_from: Optional[datetime] = None
    date_to: Optional[datetime] = None
    limit: Optional[int] = None


def _required_message(model: str, field: str) -> str:
    return f"{model} validation failed: {field}: Path `{field}` is required."


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def parse_date_field(value: Any) -> Optional[datetime]:
    """Parse an optional date field; blank means not supplied."""
    text = _text(value)
    if not text:
        return None
    try:
        return date_to_datetime(parse_calendar_date(text))
    except ValueError:
        raise ValidationError("Invalid date")


def validate_new_user(payload: Mapping[str, Any]) -> User:
    """Build a User from a submitted form, requiring a non-empty username."""
    username = payload.get("username")
    if not _text(username):
        raise ValidationError(_required_message("User", "username"))
    return User(username=str(username))


def validate_new_exercise(user_id: ObjectId, payload: Mapping[str, Any]) -> Exercise:
    """Build an Exercise for ``user_id`` from a submitted form.

    ``description`` and ``duration`` are required; ``date`` defaults to
    today when blank.
    """
    description = payload.get("description")
    if not _text(description):
        raise ValidationError(_required_message("Exercise", "description"))

    raw_duration = payload.get("duration")
    if raw_duration is None or _text(raw_duration) == "":
        raise ValidationError(_required_message("Exercise", "duration"))
    duration = parse_int(raw_duration)
    if duration is None or abs(duration) > MAX_BSON_INT:
        raise ValidationError("Exercise validation failed: duration: Invalid duration")

    date = parse_date_field(payload.get("date"))
    if date is None:
        date = date_to_datetime(today())

    return Exercise(
        user_id=user_id,
        description=str(description),
        duration=duration,
        date=date,
    )


def validate_log_filters(
    date_from: Optional[str] = None,
    date_to: Optional[str] = None,
    limit: Optional[str] = None,
) -> LogFilters:
    """Parse ``from``/``to``/``limit`` query values.

    A limit that is not a positive integer is ignored rather than rejected;
    one too large for BSON is capped.
    """
    parsed_limit = parse_int(limit) if limit is not None else None
    if parsed_limit is not None and parsed_limit <= 0:
        parsed_limit = None
    if parsed_limit is not None:
        parsed_limit = min(parsed_limit, MAX_BSON_INT)
    return LogFilters(
        date_from=parse_date_field(date_from),
        date_to=parse_date_field(date_to),
        limit=parsed_limit,
    )
