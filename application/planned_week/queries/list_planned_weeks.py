"""ListPlannedWeeksQuery - page through a tenant's planned weeks."""

from dataclasses import dataclass
from typing import Optional

from domain.planned_week.core.entities.planned_week_snapshot import PlannedWeekSnapshot
from domain.planned_week.core.ports.repository import IPlannedWeekRepository
from domain.shared.errors import InvalidInputError
from domain.shared.value_objects.calendar_date import DateLike, parse_iso_date

MAX_PAGE_SIZE = 100


@dataclass(frozen=True)
class ListPlannedWeeksQuery:
    """Query to list planned weeks.

    Attributes:
        tenant_id: Tenant identifier
        start_date: Only weeks starting on or after this date
        end_date: Only weeks starting on or before this date
        limit: Page size (1-100)
        offset: Items to skip
    """

    tenant_id: str
    start_date: Optional[DateLike] = None
    end_date: Optional[DateLike] = None
    limit: int = 20
    offset: int = 0


@dataclass(frozen=True)
class ListPlannedWeeksResult:
    """Page of planned weeks.

    Attributes:
        items: Snapshots ordered by starting date
        total: Total matching weeks
        limit: Page size used
        offset: Offset used
    """

    items: list[PlannedWeekSnapshot]
    total: int
    limit: int
    offset: int


class ListPlannedWeeksQueryHandler:
    """Handler for ListPlannedWeeksQuery."""

    def __init__(self, repository: IPlannedWeekRepository):
        self._repository = repository

    async def handle(self, query: ListPlannedWeeksQuery) -> ListPlannedWeeksResult:
        """
        Handle list query.

        Raises:
            InvalidInputError: On bad dates or pagination values
        """
        if not 1 <= query.limit <= MAX_PAGE_SIZE:
            raise InvalidInputError(f"limit must be between 1 and {MAX_PAGE_SIZE}")
        if query.offset < 0:
            raise InvalidInputError("offset must be non-negative")

        start_date = parse_iso_date(query.start_date) if query.start_date is not None else None
        end_date = parse_iso_date(query.end_date) if query.end_date is not None else None

        weeks, total = await self._repository.find_all(
            query.tenant_id,
            start_date=start_date,
            end_date=end_date,
            limit=query.limit,
            offset=query.offset,
        )

        return ListPlannedWeeksResult(
            items=[week.to_snapshot() for week in weeks],
            total=total,
            limit=query.limit,
            offset=query.offset,
        )
