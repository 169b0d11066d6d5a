"""IMealRepository port - meal catalog persistence and queries."""

from abc import ABC, abstractmethod
from typing import List, Mapping, Optional, Tuple

from ..entities.meal import Meal
from ..value_objects.meal_summary import MealSummary

# Boolean AND constraint map, e.g. {"is_archived": False, "is_lunch": True}
MealQualitiesFilter = Mapping[str, bool]


class IMealRepository(ABC):
    """Port for the tenant meal catalog.

    All operations are scoped by tenant; a meal of another tenant is never
    returned.
    """

    @abstractmethod
    async def save(self, meal: Meal) -> None:
        """Save meal (create or update).

        Args:
            meal: Meal to save

        Raises:
            ConflictError: If the meal id belongs to another tenant
        """
        pass

    @abstractmethod
    async def find_by_id(self, meal_id: str, tenant_id: str) -> Optional[Meal]:
        """Find meal by ID within a tenant.

        Returns:
            Optional[Meal]: Meal if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_qualities(
        self, tenant_id: str, meal_filter: MealQualitiesFilter
    ) -> list[MealSummary]:
        """Find meals matching every constraint of the meal filter.

        Args:
            tenant_id: Tenant whose catalog is searched
            meal_filter: ``is_archived`` plus quality flag keys, each required
                to equal the given boolean

        Returns:
            list[MealSummary]: Matching meals, in catalog-defined order
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        tenant_id: str,
        name: Optional[str] = None,
        qualities: Optional[MealQualitiesFilter] = None,
        include_archived: bool = False,
        limit: int = 50,
        offset: int = 0,
    ) -> Tuple[List[Meal], int]:
        """List a tenant's meals ordered by name.

        Args:
            tenant_id: Tenant whose catalog is listed
            name: Case-insensitive substring of the meal name
            qualities: Quality flags each required to equal the given boolean
            include_archived: Also return archived meals
            limit: Page size
            offset: Meals to skip

        Returns:
            Tuple[List[Meal], int]: Page of meals and total matching count
        """
        pass
