"""ISO calendar date parsing."""

from datetime import date, datetime
from typing import Union

from ..errors import InvalidInputError

DateLike = Union[date, str]


def parse_iso_date(value: DateLike) -> date:
    """Parse a calendar date.

    Accepts ``date`` instances (``datetime`` is truncated to its date) and
    ISO 8601 strings. A time component in the string is dropped.

    Args:
        value: Date or ISO string (``YYYY-MM-DD``)

    Returns:
        date: Parsed calendar date

    Raises:
        InvalidInputError: If value cannot be parsed

    Example:
        >>> parse_iso_date("2025-01-06")
        datetime.date(2025, 1, 6)
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        raise InvalidInputError("invalid date supplied")

    text = value.strip()
    try:
        if len(text) > 10:
            return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
        return date.fromisoformat(text)
    except ValueError as e:
        raise InvalidInputError("invalid date supplied") from e
