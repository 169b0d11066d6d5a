"""DeletePlannedWeekCommand - remove a planned week."""

from dataclasses import dataclass

import structlog

from domain.planned_week.core.ports.repository import IPlannedWeekRepository
from domain.shared.errors import NotFoundError

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class DeletePlannedWeekCommand:
    """Command to delete a planned week.

    Attributes:
        tenant_id: Tenant identifier
        planned_week_id: Planned week identifier
    """

    tenant_id: str
    planned_week_id: str


class DeletePlannedWeekHandler:
    """Handler for DeletePlannedWeekCommand."""

    def __init__(self, repository: IPlannedWeekRepository):
        self._repository = repository

    async def handle(self, command: DeletePlannedWeekCommand) -> None:
        """
        Handle planned week deletion.

        Raises:
            NotFoundError: If the week does not exist for the tenant
        """
        week = await self._repository.find_by_id(command.planned_week_id, command.tenant_id)
        if week is None:
            raise NotFoundError("planned week not found")

        await self._repository.delete(command.planned_week_id, command.tenant_id)
        logger.info(
            "Planned week deleted",
            tenant_id=command.tenant_id,
            planned_week_id=command.planned_week_id,
        )
