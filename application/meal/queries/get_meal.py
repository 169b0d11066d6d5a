"""GetMealQuery - retrieve a catalog meal."""

from dataclasses import dataclass

from domain.meal.core.entities.meal import Meal
from domain.meal.core.ports.meal_repository import IMealRepository
from domain.shared.errors import NotFoundError


@dataclass(frozen=True)
class GetMealQuery:
    """Query to retrieve a meal by ID.

    Attributes:
        tenant_id: Tenant identifier
        meal_id: Meal identifier
    """

    tenant_id: str
    meal_id: str


class GetMealQueryHandler:
    """Handler for GetMealQuery."""

    def __init__(self, repository: IMealRepository):
        self._repository = repository

    async def handle(self, query: GetMealQuery) -> Meal:
        """
        Raises:
            NotFoundError: If the meal does not exist for the tenant
        """
        meal = await self._repository.find_by_id(query.meal_id, query.tenant_id)
        if meal is None:
            raise NotFoundError("meal not found")
        return meal
