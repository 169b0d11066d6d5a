"""WeekStartDay value object - first weekday of a planned week."""

from enum import Enum
from typing import Union

from ..errors import ValidationError


class WeekStartDay(str, Enum):
    """Weekday a tenant's planned weeks must start on.

    - MONDAY: ISO-style weeks
    - SATURDAY: weekend-first weeks
    - SUNDAY: US-style weeks
    """

    MONDAY = "MONDAY"
    SATURDAY = "SATURDAY"
    SUNDAY = "SUNDAY"

    @classmethod
    def parse(cls, value: Union["WeekStartDay", str]) -> "WeekStartDay":
        """
        Parse a week start day name (case-insensitive).

        Raises:
            ValidationError: If value is not a supported week start day
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError as e:
            allowed = ", ".join(day.value for day in cls)
            raise ValidationError(f"Invalid week start day. Must be one of: {allowed}") from e

    def day_index(self) -> int:
        """Get Sunday-based weekday index (0-6).

        Returns:
            int: Index comparable with ``day_index(date)``

        Example:
            >>> WeekStartDay.SATURDAY.day_index()
            6
        """
        indexes = {
            WeekStartDay.SUNDAY: 0,
            WeekStartDay.MONDAY: 1,
            WeekStartDay.SATURDAY: 6,
        }
        return indexes[self]
