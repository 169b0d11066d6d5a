"""In-memory planned week repository implementation."""

from copy import deepcopy
from datetime import date
from typing import Dict, List, Optional, Tuple

from domain.planned_week.core.entities.planned_week import PlannedWeek
from domain.planned_week.core.ports.repository import IPlannedWeekRepository
from domain.shared.errors import ConflictError


class InMemoryPlannedWeekRepository(IPlannedWeekRepository):
    """
    In-memory implementation of IPlannedWeekRepository.

    Weeks are stored through their snapshots so captured dinner
    assignments survive a round trip exactly like in a real store.
    Enforces one week per (tenant_id, starting_date).

    Thread safety: NOT thread-safe
    """

    def __init__(self) -> None:
        self._storage: Dict[str, PlannedWeek] = {}

    async def create(self, week: PlannedWeek) -> PlannedWeek:
        """
        Insert a new week.

        Raises:
            ConflictError: If the id or the (tenant, starting date) pair
                is already taken
        """
        if week.id in self._storage or self._find_key(week.tenant_id, week.starting_date):
            raise ConflictError("planned week already exists for this start date")
        self._storage[week.id] = _copy(week)
        return _copy(week)

    async def save(self, week: PlannedWeek) -> PlannedWeek:
        """
        Upsert the full aggregate.

        Raises:
            ConflictError: If another week of the tenant owns the starting date
        """
        owner = self._find_key(week.tenant_id, week.starting_date)
        if owner is not None and owner != week.id:
            raise ConflictError("planned week already exists for this start date")
        self._storage[week.id] = _copy(week)
        return _copy(week)

    async def find_by_id(self, week_id: str, tenant_id: str) -> Optional[PlannedWeek]:
        week = self._storage.get(week_id)
        if week is None or week.tenant_id != tenant_id:
            return None
        return _copy(week)

    async def find_by_tenant_and_start_date(
        self, tenant_id: str, starting_date: date
    ) -> Optional[PlannedWeek]:
        key = self._find_key(tenant_id, starting_date)
        return _copy(self._storage[key]) if key is not None else None

    async def find_all(
        self,
        tenant_id: str,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> Tuple[List[PlannedWeek], int]:
        weeks = [
            week
            for week in self._storage.values()
            if week.tenant_id == tenant_id
            and (start_date is None or week.starting_date >= start_date)
            and (end_date is None or week.starting_date <= end_date)
        ]
        weeks.sort(key=lambda w: w.starting_date)
        page = weeks[offset : offset + limit]
        return [_copy(week) for week in page], len(weeks)

    async def delete(self, week_id: str, tenant_id: str) -> None:
        week = self._storage.get(week_id)
        if week is not None and week.tenant_id == tenant_id:
            del self._storage[week_id]

    def clear(self) -> None:
        """Clear all weeks (test utility)."""
        self._storage.clear()

    def count(self) -> int:
        return len(self._storage)

    def _find_key(self, tenant_id: str, starting_date: date) -> Optional[str]:
        for key, week in self._storage.items():
            if week.tenant_id == tenant_id and week.starting_date == starting_date:
                return key
        return None


def _copy(week: PlannedWeek) -> PlannedWeek:
    return PlannedWeek.rehydrate(deepcopy(week.to_snapshot()))
