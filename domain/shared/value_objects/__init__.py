"""Shared value objects.

Calendar primitives used by the planned week, meal and user settings
contexts.
"""

from .calendar_date import DateLike, parse_iso_date
from .day_of_week import (
    DAY_INDEX_TO_DAY_OF_WEEK,
    DAY_INDEX_TO_SHORT_DAY,
    DayOfWeek,
    ShortDay,
    day_index,
)
from .meal_slot import MealSlot
from .week_start_day import WeekStartDay

__all__ = [
    "DAY_INDEX_TO_DAY_OF_WEEK",
    "DAY_INDEX_TO_SHORT_DAY",
    "DateLike",
    "DayOfWeek",
    "MealSlot",
    "ShortDay",
    "WeekStartDay",
    "day_index",
    "parse_iso_date",
]
