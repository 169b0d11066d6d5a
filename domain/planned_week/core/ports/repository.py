"""IPlannedWeekRepository port - repository interface."""

from abc import ABC, abstractmethod
from datetime import date
from typing import Optional

from ..entities.planned_week import PlannedWeek


class IPlannedWeekRepository(ABC):
    """Port for planned week persistence.

    Every operation is scoped by tenant. Weeks are written as a whole: day
    plans, leftover flags and captured dinner assignments in one operation.
    At most one week exists per (tenant, starting date).
    """

    @abstractmethod
    async def create(self, week: PlannedWeek) -> PlannedWeek:
        """Insert a new planned week.

        Args:
            week: Week to insert

        Returns:
            PlannedWeek: Stored week

        Raises:
            ConflictError: If the tenant already has a week starting on the
                same date
        """
        pass

    @abstractmethod
    async def save(self, week: PlannedWeek) -> PlannedWeek:
        """Upsert the full aggregate.

        Args:
            week: Week to save

        Returns:
            PlannedWeek: Stored week
        """
        pass

    @abstractmethod
    async def find_by_id(self, week_id: str, tenant_id: str) -> Optional[PlannedWeek]:
        """Find planned week by ID within a tenant.

        Returns:
            Optional[PlannedWeek]: Week if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_tenant_and_start_date(
        self, tenant_id: str, starting_date: date
    ) -> Optional[PlannedWeek]:
        """Find the tenant's week starting on a date.

        Returns:
            Optional[PlannedWeek]: Week if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        tenant_id: str,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> tuple[list[PlannedWeek], int]:
        """List a tenant's weeks ordered by starting date.

        Args:
            tenant_id: Tenant identifier
            start_date: Only weeks starting on or after this date
            end_date: Only weeks starting on or before this date
            limit: Page size
            offset: Items to skip

        Returns:
            tuple[list[PlannedWeek], int]: Page of weeks and total matches
        """
        pass

    @abstractmethod
    async def delete(self, week_id: str, tenant_id: str) -> None:
        """Delete planned week.

        Args:
            week_id: Planned week identifier
            tenant_id: Tenant identifier
        """
        pass
