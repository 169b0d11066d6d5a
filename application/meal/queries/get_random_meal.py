"""GetRandomMealQuery - uniform random pick among eligible meals."""

import secrets
from typing import Callable, Optional, Sequence

import structlog

from domain.meal.core.value_objects.meal_summary import MealSummary

from .get_eligible_meals import GetEligibleMealsQuery, GetEligibleMealsQueryHandler

logger = structlog.get_logger(__name__)

# Same request shape as the eligibility query
GetRandomMealQuery = GetEligibleMealsQuery

Chooser = Callable[[Sequence[MealSummary]], MealSummary]


class GetRandomMealQueryHandler:
    """Handler for GetRandomMealQuery.

    Picks one eligible meal with probability 1/n using OS entropy
    (``secrets.choice``). Nothing is stored between calls.
    """

    def __init__(
        self,
        eligible_meals_handler: GetEligibleMealsQueryHandler,
        chooser: Chooser = secrets.choice,
    ):
        self._eligible_meals_handler = eligible_meals_handler
        self._chooser = chooser

    async def handle(self, query: GetRandomMealQuery) -> Optional[MealSummary]:
        """
        Handle random meal query.

        Returns:
            Optional[MealSummary]: A random eligible meal, None when no meal
                is eligible

        Raises:
            InvalidInputError: If date cannot be parsed
            NotFoundError: If the tenant has no settings
        """
        eligible = await self._eligible_meals_handler.handle(query)

        if not eligible:
            logger.info(
                "No eligible meal",
                tenant_id=query.tenant_id,
                meal_type=str(query.meal_type),
            )
            return None

        return self._chooser(eligible)
