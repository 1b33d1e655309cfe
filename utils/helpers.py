"""Helper utility functions."""

from datetime import date, datetime, time, timezone
from typing import Any, Optional

DISPLAY_DATE_FORMAT = "%a %b %d %Y"

# Largest integer BSON can store (int64).
MAX_BSON_INT = 2**63 - 1


def parse_calendar_date(value: str) -> date:
    """Parse a calendar date from a request value.

    Accepts ``YYYY-MM-DD`` or a full ISO datetime string; only the date
    part of a datetime is kept.

    Raises:
        ValueError: If the value is not a recognizable date.
    """
    text = value.strip()
    try:
        return datetime.strptime(text, "%Y-%m-%d").date()
    except ValueError:
        pass
    # Try parsing ISO format
    return datetime.fromisoformat(text.replace("Z", "+00:00")).date()


def today() -> date:
    """Current calendar date in UTC."""
    return datetime.now(timezone.utc).date()


def date_to_datetime(value: date) -> datetime:
    """UTC midnight of a calendar date, as stored in MongoDB."""
    return datetime.combine(value, time.min)


def format_display_date(value: datetime) -> str:
    """Format a stored date as e.g. ``Mon Jan 02 2023``."""
    return value.strftime(DISPLAY_DATE_FORMAT)


def parse_int(value: Any) -> Optional[int]:
    """Parse a base-10 integer from a form or JSON value.

    Returns None when the value is not an integer. Integral floats such as
    ``30.0`` from a JSON body are accepted.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        text = value.strip()
        # int() alone would also take "1_000" and non-ASCII digits.
        digits = text[1:] if text[:1] in ("+", "-") else text
        if not (digits.isascii() and digits.isdigit()):
            return None
        return int(text, 10)
    return None
