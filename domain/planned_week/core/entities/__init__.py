"""Planned week domain entities."""

from .day_plan import DayPlan
from .planned_week_snapshot import PlannedWeekSnapshot
from .planned_week import DAYS_IN_WEEK, PlannedWeek

__all__ = ["DAYS_IN_WEEK", "DayPlan", "PlannedWeek", "PlannedWeekSnapshot"]
