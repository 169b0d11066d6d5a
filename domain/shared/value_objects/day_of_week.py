"""DayOfWeek and ShortDay value objects - weekday labels."""

from datetime import date
from enum import Enum


def day_index(value: date) -> int:
    """Sunday-based weekday index of a calendar date.

    Args:
        value: Calendar date

    Returns:
        int: 0 for Sunday through 6 for Saturday

    Example:
        >>> day_index(date(2025, 1, 5))
        0
        >>> day_index(date(2025, 1, 6))
        1
    """
    return value.isoweekday() % 7


class DayOfWeek(str, Enum):
    """Full weekday label."""

    MONDAY = "MONDAY"
    TUESDAY = "TUESDAY"
    WEDNESDAY = "WEDNESDAY"
    THURSDAY = "THURSDAY"
    FRIDAY = "FRIDAY"
    SATURDAY = "SATURDAY"
    SUNDAY = "SUNDAY"

    @staticmethod
    def from_index(index: int) -> "DayOfWeek":
        """Get weekday from a Sunday-based index (0-6)."""
        return DAY_INDEX_TO_DAY_OF_WEEK[index]

    @staticmethod
    def from_date(value: date) -> "DayOfWeek":
        """Get weekday of a calendar date.

        Example:
            >>> DayOfWeek.from_date(date(2025, 1, 6))
            <DayOfWeek.MONDAY: 'MONDAY'>
        """
        return DAY_INDEX_TO_DAY_OF_WEEK[day_index(value)]


class ShortDay(str, Enum):
    """Abbreviated weekday label."""

    MON = "MON"
    TUE = "TUE"
    WED = "WED"
    THU = "THU"
    FRI = "FRI"
    SAT = "SAT"
    SUN = "SUN"

    @staticmethod
    def from_date(value: date) -> "ShortDay":
        """Get abbreviated weekday of a calendar date."""
        return DAY_INDEX_TO_SHORT_DAY[day_index(value)]


# Index tables (0 = Sunday)
DAY_INDEX_TO_DAY_OF_WEEK: tuple[DayOfWeek, ...] = (
    DayOfWeek.SUNDAY,
    DayOfWeek.MONDAY,
    DayOfWeek.TUESDAY,
    DayOfWeek.WEDNESDAY,
    DayOfWeek.THURSDAY,
    DayOfWeek.FRIDAY,
    DayOfWeek.SATURDAY,
)

DAY_INDEX_TO_SHORT_DAY: tuple[ShortDay, ...] = (
    ShortDay.SUN,
    ShortDay.MON,
    ShortDay.TUE,
    ShortDay.WED,
    ShortDay.THU,
    ShortDay.FRI,
    ShortDay.SAT,
)
