"""AssignMealToDayCommand - place or clear a meal in a day plan slot."""

from dataclasses import dataclass
from typing import Optional, Union

import structlog

from domain.planned_week.core.entities.planned_week import PlannedWeek
from domain.planned_week.core.ports.repository import IPlannedWeekRepository
from domain.planned_week.core.value_objects.meal_assignment import MealAssignment
from domain.shared.errors import NotFoundError
from domain.shared.value_objects.calendar_date import DateLike
from domain.shared.value_objects.meal_slot import MealSlot

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class AssignMealToDayCommand:
    """Command to assign a meal to a slot.

    Attributes:
        tenant_id: Tenant identifier
        planned_week_id: Planned week identifier
        date: Day to change (date or ISO string)
        slot: Lunch or dinner
        assignment: Meal to place; None clears the slot
    """

    tenant_id: str
    planned_week_id: str
    date: DateLike
    slot: Union[MealSlot, str]
    assignment: Optional[MealAssignment] = None


class AssignMealToDayHandler:
    """Handler for AssignMealToDayCommand.

    Dinner changes are followed by a leftover recompute so the next day's
    lunch reflects the new dinner. The week is saved as a whole.
    """

    def __init__(self, repository: IPlannedWeekRepository):
        self._repository = repository

    async def handle(self, command: AssignMealToDayCommand) -> PlannedWeek:
        """
        Handle meal assignment.

        Returns:
            PlannedWeek: Saved week

        Raises:
            NotFoundError: If the week or the date does not exist
            InvalidInputError: If date cannot be parsed
        """
        week = await self._repository.find_by_id(command.planned_week_id, command.tenant_id)
        if week is None:
            raise NotFoundError("planned week not found")

        slot = MealSlot.parse(command.slot)
        week.assign_meal(command.date, slot, command.assignment)

        if slot is MealSlot.DINNER:
            week.populate_leftovers()

        saved = await self._repository.save(week)

        logger.info(
            "Meal slot updated",
            tenant_id=command.tenant_id,
            planned_week_id=command.planned_week_id,
            slot=slot.value,
            meal_id=command.assignment.meal_id if command.assignment else None,
        )
        return saved
