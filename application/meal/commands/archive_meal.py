"""ArchiveMealCommand / RestoreMealCommand - toggle a meal's archive state.

Archived meals stay in the catalog (planned weeks may still reference
them) but are excluded from eligibility queries and default listings.
"""

from dataclasses import dataclass

import structlog

from domain.meal.core.entities.meal import Meal
from domain.meal.core.ports.meal_repository import IMealRepository
from domain.shared.errors import NotFoundError

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ArchiveMealCommand:
    """Command to archive a meal.

    Attributes:
        tenant_id: Tenant identifier
        meal_id: Meal identifier
    """

    tenant_id: str
    meal_id: str


@dataclass(frozen=True)
class RestoreMealCommand:
    """Command to bring an archived meal back into the catalog."""

    tenant_id: str
    meal_id: str


class ArchiveMealHandler:
    """Handler for ArchiveMealCommand. Archiving twice is a no-op."""

    def __init__(self, repository: IMealRepository):
        self._repository = repository

    async def handle(self, command: ArchiveMealCommand) -> Meal:
        """
        Raises:
            NotFoundError: If the meal does not exist for the tenant
        """
        meal = await _load(self._repository, command.meal_id, command.tenant_id)
        meal.archive()
        await self._repository.save(meal)

        logger.info("Meal archived", tenant_id=command.tenant_id, meal_id=meal.id)
        return meal


class RestoreMealHandler:
    """Handler for RestoreMealCommand."""

    def __init__(self, repository: IMealRepository):
        self._repository = repository

    async def handle(self, command: RestoreMealCommand) -> Meal:
        meal = await _load(self._repository, command.meal_id, command.tenant_id)
        meal.restore()
        await self._repository.save(meal)

        logger.info("Meal restored", tenant_id=command.tenant_id, meal_id=meal.id)
        return meal


async def _load(repository: IMealRepository, meal_id: str, tenant_id: str) -> Meal:
    meal = await repository.find_by_id(meal_id, tenant_id)
    if meal is None:
        raise NotFoundError("meal not found")
    return meal
