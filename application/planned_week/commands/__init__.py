"""CQRS Commands for Planned Week domain."""

from application.planned_week.commands.assign_meal_to_day import (
    AssignMealToDayCommand,
    AssignMealToDayHandler,
)
from application.planned_week.commands.create_planned_week import (
    CreatePlannedWeekCommand,
    CreatePlannedWeekHandler,
)
from application.planned_week.commands.delete_planned_week import (
    DeletePlannedWeekCommand,
    DeletePlannedWeekHandler,
)
from application.planned_week.commands.populate_leftovers import (
    PopulateLeftoversCommand,
    PopulateLeftoversHandler,
)

__all__ = [
    "AssignMealToDayCommand",
    "AssignMealToDayHandler",
    "CreatePlannedWeekCommand",
    "CreatePlannedWeekHandler",
    "DeletePlannedWeekCommand",
    "DeletePlannedWeekHandler",
    "PopulateLeftoversCommand",
    "PopulateLeftoversHandler",
]
