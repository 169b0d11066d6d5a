"""GetPlannedWeekQuery - retrieve a planned week."""

from dataclasses import dataclass

from domain.planned_week.core.entities.planned_week import PlannedWeek
from domain.planned_week.core.ports.repository import IPlannedWeekRepository
from domain.shared.errors import NotFoundError


@dataclass(frozen=True)
class GetPlannedWeekQuery:
    """Query to retrieve a planned week by ID.

    Attributes:
        tenant_id: Tenant identifier
        planned_week_id: Planned week identifier
    """

    tenant_id: str
    planned_week_id: str


class GetPlannedWeekQueryHandler:
    """Handler for GetPlannedWeekQuery."""

    def __init__(self, repository: IPlannedWeekRepository):
        self._repository = repository

    async def handle(self, query: GetPlannedWeekQuery) -> PlannedWeek:
        """
        Raises:
            NotFoundError: If the week does not exist for the tenant
        """
        week = await self._repository.find_by_id(query.planned_week_id, query.tenant_id)
        if week is None:
            raise NotFoundError("planned week not found")
        return week
