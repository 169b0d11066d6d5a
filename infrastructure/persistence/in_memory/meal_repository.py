"""In-memory meal repository implementation.

Dictionary-backed implementation of IMealRepository for tests and the
default backend.
"""

from copy import deepcopy
from datetime import datetime, timezone
from typing import Dict, List, Optional, Tuple

from domain.meal.core.entities.meal import Meal
from domain.meal.core.ports.meal_repository import IMealRepository, MealQualitiesFilter
from domain.meal.core.value_objects.meal_summary import MealSummary
from domain.shared.errors import ConflictError


class InMemoryMealRepository(IMealRepository):
    """
    In-memory implementation of IMealRepository port.

    Thread safety: NOT thread-safe
    Persistence: Data lost on process restart (in-memory only)

    Example:
        >>> repository = InMemoryMealRepository()
        >>> meal = Meal.create("tenant-1", "Risotto", is_creamy=True)
        >>> await repository.save(meal)
        >>> await repository.find_by_id(meal.id, "tenant-1")
    """

    def __init__(self) -> None:
        self._storage: Dict[str, Meal] = {}

    async def save(self, meal: Meal) -> None:
        """
        Save or update a meal in memory.

        Stores a deep copy and refreshes ``meal.updated_at``.

        Raises:
            ConflictError: If the id is taken by another tenant's meal
        """
        stored = self._storage.get(meal.id)
        if stored is not None and stored.tenant_id != meal.tenant_id:
            raise ConflictError("meal already exists")
        meal.updated_at = datetime.now(timezone.utc)
        self._storage[meal.id] = deepcopy(meal)

    async def find_by_id(self, meal_id: str, tenant_id: str) -> Optional[Meal]:
        meal = self._storage.get(meal_id)
        if meal is None or meal.tenant_id != tenant_id:
            return None
        return deepcopy(meal)

    async def find_by_qualities(
        self, tenant_id: str, meal_filter: MealQualitiesFilter
    ) -> List[MealSummary]:
        """
        Find tenant meals matching every key of the filter.

        ``is_archived`` compares against the archive state; every other key
        against the meal's quality flags. Results are ordered by name.
        """
        matches = [
            meal
            for meal in self._storage.values()
            if meal.tenant_id == tenant_id and _matches(meal, meal_filter)
        ]
        matches.sort(key=lambda m: (m.name.lower(), m.id))
        return [meal.to_summary() for meal in matches]

    async def find_all(
        self,
        tenant_id: str,
        name: Optional[str] = None,
        qualities: Optional[MealQualitiesFilter] = None,
        include_archived: bool = False,
        limit: int = 50,
        offset: int = 0,
    ) -> Tuple[List[Meal], int]:
        needle = name.casefold() if name else None
        matches = [
            meal
            for meal in self._storage.values()
            if meal.tenant_id == tenant_id
            and (include_archived or not meal.is_archived)
            and (needle is None or needle in meal.name.casefold())
            and _matches(meal, qualities or {})
        ]
        matches.sort(key=lambda m: (m.name.lower(), m.id))
        page = matches[offset : offset + limit]
        return [deepcopy(meal) for meal in page], len(matches)

    def clear(self) -> None:
        """Clear all meals (test utility, not part of the port)."""
        self._storage.clear()

    def count(self) -> int:
        return len(self._storage)


def _matches(meal: Meal, meal_filter: MealQualitiesFilter) -> bool:
    flags = meal.qualities.to_dict()
    for key, expected in meal_filter.items():
        actual = meal.is_archived if key == "is_archived" else flags.get(key)
        if actual is not expected:
            return False
    return True
