"""DayPlan entity - lunch/dinner assignments of one calendar day."""

from dataclasses import dataclass
from datetime import date
from typing import Optional

from domain.shared.value_objects.day_of_week import DayOfWeek, ShortDay


@dataclass
class DayPlan:
    """One day of a planned week.

    Weekday labels are read-only and always computed from ``date``.

    Attributes:
        date: Calendar date
        lunch_meal_id: Meal in the lunch slot
        dinner_meal_id: Meal in the dinner slot
        is_leftover: Lunch was filled from the previous day's dinner
    """

    date: date
    lunch_meal_id: Optional[str] = None
    dinner_meal_id: Optional[str] = None
    is_leftover: bool = False

    @classmethod
    def empty(cls, day: date) -> "DayPlan":
        """Day plan with empty slots."""
        return cls(date=day)

    @property
    def long_day(self) -> DayOfWeek:
        return DayOfWeek.from_date(self.date)

    @property
    def short_day(self) -> ShortDay:
        return ShortDay.from_date(self.date)

    @property
    def has_manual_lunch(self) -> bool:
        """Lunch set by an explicit assignment rather than propagation."""
        return self.lunch_meal_id is not None and not self.is_leftover
