"""PlannedWeekSnapshot - flat persisted shape of a planned week."""

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from domain.shared.value_objects.week_start_day import WeekStartDay

from ..value_objects.meal_assignment import MealAssignment
from .day_plan import DayPlan


@dataclass(frozen=True)
class PlannedWeekSnapshot:
    """Serializable state of a PlannedWeek aggregate.

    ``dinner_assignments`` carries the ``makes_lunch`` decision captured for
    each dinner. It cannot be recomputed from the meal catalog, so stores
    must persist it next to the day plans. ``None`` marks a snapshot written
    before the map existed.
    """

    id: str
    tenant_id: str
    starting_date: date
    week_start_day: WeekStartDay
    day_plans: tuple[DayPlan, ...] = field(default_factory=tuple)
    dinner_assignments: Optional[dict[date, MealAssignment]] = None
