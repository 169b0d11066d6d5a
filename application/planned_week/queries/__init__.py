"""CQRS Queries for Planned Week domain."""

from application.planned_week.queries.get_planned_week import (
    GetPlannedWeekQuery,
    GetPlannedWeekQueryHandler,
)
from application.planned_week.queries.list_planned_weeks import (
    ListPlannedWeeksQuery,
    ListPlannedWeeksQueryHandler,
    ListPlannedWeeksResult,
)

__all__ = [
    "GetPlannedWeekQuery",
    "GetPlannedWeekQueryHandler",
    "ListPlannedWeeksQuery",
    "ListPlannedWeeksQueryHandler",
    "ListPlannedWeeksResult",
]
