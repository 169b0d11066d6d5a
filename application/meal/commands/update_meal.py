"""UpdateMealCommand - rename a meal or change its quality flags."""

from dataclasses import dataclass
from typing import Mapping, Optional

import structlog

from domain.meal.core.entities.meal import Meal
from domain.meal.core.ports.meal_repository import IMealRepository
from domain.shared.errors import NotFoundError

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class UpdateMealCommand:
    """Command to update a catalog meal.

    Fields left as None are unchanged.

    Attributes:
        tenant_id: Tenant identifier
        meal_id: Meal identifier
        name: New display name
        qualities: Quality flag changes merged into the current flags
    """

    tenant_id: str
    meal_id: str
    name: Optional[str] = None
    qualities: Optional[Mapping[str, bool]] = None


class UpdateMealHandler:
    """Handler for UpdateMealCommand.

    Planned weeks keep the ``makes_lunch`` decision captured when the meal
    was assigned, so flag changes only affect future assignments and
    eligibility queries.
    """

    def __init__(self, repository: IMealRepository):
        self._repository = repository

    async def handle(self, command: UpdateMealCommand) -> Meal:
        """
        Handle meal update.

        Raises:
            NotFoundError: If the meal does not exist for the tenant
            ValidationError: If the new name or flags are invalid (nothing
                is saved)
        """
        meal = await self._repository.find_by_id(command.meal_id, command.tenant_id)
        if meal is None:
            raise NotFoundError("meal not found")

        if command.name is not None:
            meal.rename(command.name)
        if command.qualities is not None:
            meal.update_qualities(**dict(command.qualities))

        await self._repository.save(meal)

        logger.info(
            "Meal updated",
            tenant_id=command.tenant_id,
            meal_id=meal.id,
            renamed=command.name is not None,
            qualities_changed=sorted(command.qualities or {}),
        )
        return meal
