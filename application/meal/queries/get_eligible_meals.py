"""GetEligibleMealsQuery - catalog meals matching a slot and the day's preferences."""

from dataclasses import dataclass
from typing import Optional, Union

import structlog

from domain.meal.core.ports.meal_repository import IMealRepository
from domain.meal.core.value_objects.meal_summary import MealSummary
from domain.shared.errors import NotFoundError
from domain.shared.value_objects.calendar_date import DateLike, parse_iso_date
from domain.shared.value_objects.day_of_week import DayOfWeek
from domain.shared.value_objects.meal_slot import MealSlot
from domain.user_settings.core.ports.repository import IUserSettingsRepository
from domain.user_settings.core.value_objects.daily_preference import DailyPreference

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class GetEligibleMealsQuery:
    """Query for meals a tenant may plan in a slot on a date.

    Attributes:
        tenant_id: Tenant identifier
        date: Target date (date or ISO string)
        meal_type: Slot to fill
    """

    tenant_id: str
    date: DateLike
    meal_type: Union[MealSlot, str]


def build_meal_filter(
    meal_type: Union[MealSlot, str], preference: Optional[DailyPreference]
) -> dict[str, bool]:
    """
    Build the catalog constraint map for a slot and a day's preference.

    Archived meals are always excluded and the slot flag is always
    required. Each preference flag set to True is required as well. Flags
    that are absent or False add no constraint.

    Args:
        meal_type: Lunch or dinner
        preference: Preference entry of the target weekday

    Returns:
        dict[str, bool]: Boolean AND constraints

    Example:
        >>> build_meal_filter(MealSlot.LUNCH, None)
        {'is_archived': False, 'is_lunch': True}
    """
    meal_filter: dict[str, bool] = {"is_archived": False}

    if MealSlot.parse(meal_type) is MealSlot.LUNCH:
        meal_filter["is_lunch"] = True
    else:
        meal_filter["is_dinner"] = True

    if preference is not None:
        for flag in preference.preferences.required_flags():
            meal_filter[flag] = True

    return meal_filter


class GetEligibleMealsQueryHandler:
    """Handler for GetEligibleMealsQuery.

    Reads the tenant's preferences on every call and delegates evaluation
    of the filter to the meal catalog.
    """

    def __init__(
        self,
        meal_repository: IMealRepository,
        user_settings_repository: IUserSettingsRepository,
    ):
        self._meal_repository = meal_repository
        self._user_settings_repository = user_settings_repository

    async def handle(self, query: GetEligibleMealsQuery) -> list[MealSummary]:
        """
        Handle eligible meals query.

        Args:
            query: Tenant, date and slot

        Returns:
            list[MealSummary]: Catalog result, unmodified

        Raises:
            InvalidInputError: If date cannot be parsed
            NotFoundError: If the tenant has no settings
        """
        target_date = parse_iso_date(query.date)

        settings = await self._user_settings_repository.find_by_tenant_id(query.tenant_id)
        if settings is None:
            raise NotFoundError("user settings not found")

        weekday = DayOfWeek.from_date(target_date)
        meal_filter = build_meal_filter(query.meal_type, settings.preference_for(weekday))

        meals = await self._meal_repository.find_by_qualities(query.tenant_id, meal_filter)

        logger.debug(
            "Eligible meals resolved",
            tenant_id=query.tenant_id,
            date=target_date.isoformat(),
            weekday=weekday.value,
            filter=meal_filter,
            count=len(meals),
        )
        return meals
