"""CreateMealCommand - add a meal to a tenant's catalog."""

from dataclasses import dataclass
from typing import Mapping, Optional

import structlog

from domain.meal.core.entities.meal import Meal
from domain.meal.core.ports.meal_repository import IMealRepository

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class CreateMealCommand:
    """Command to create a catalog meal.

    Attributes:
        tenant_id: Tenant identifier
        name: Display name
        qualities: Partial quality flags; unset flags keep their defaults
    """

    tenant_id: str
    name: str
    qualities: Optional[Mapping[str, bool]] = None


class CreateMealHandler:
    """Handler for CreateMealCommand."""

    def __init__(self, repository: IMealRepository):
        self._repository = repository

    async def handle(self, command: CreateMealCommand) -> Meal:
        """
        Handle meal creation.

        Returns:
            Meal: Created meal

        Raises:
            ValidationError: If the name is empty or the flags are invalid
        """
        meal = Meal.create(command.tenant_id, command.name, **dict(command.qualities or {}))
        await self._repository.save(meal)

        logger.info(
            "Meal created",
            tenant_id=command.tenant_id,
            meal_id=meal.id,
            meal_name=meal.name,
        )
        return meal
