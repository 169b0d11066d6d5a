"""PopulateLeftoversCommand - recompute leftover lunches of a planned week."""

from dataclasses import dataclass

import structlog

from domain.planned_week.core.entities.planned_week import PlannedWeek
from domain.planned_week.core.ports.repository import IPlannedWeekRepository
from domain.shared.errors import NotFoundError

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class PopulateLeftoversCommand:
    """Command to recompute leftovers.

    Attributes:
        tenant_id: Tenant identifier
        planned_week_id: Planned week identifier
    """

    tenant_id: str
    planned_week_id: str


class PopulateLeftoversHandler:
    """Handler for PopulateLeftoversCommand."""

    def __init__(self, repository: IPlannedWeekRepository):
        self._repository = repository

    async def handle(self, command: PopulateLeftoversCommand) -> PlannedWeek:
        """
        Handle leftover recompute.

        Raises:
            NotFoundError: If the week does not exist
        """
        week = await self._repository.find_by_id(command.planned_week_id, command.tenant_id)
        if week is None:
            raise NotFoundError("planned week not found")

        week.populate_leftovers()
        saved = await self._repository.save(week)

        logger.info(
            "Leftovers populated",
            tenant_id=command.tenant_id,
            planned_week_id=command.planned_week_id,
            leftover_days=sum(1 for plan in saved.day_plans if plan.is_leftover),
        )
        return saved
