"""UpdateUserSettingsCommand - change week start day and daily preferences."""

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence, Union

import structlog

from domain.shared.value_objects.week_start_day import WeekStartDay
from domain.user_settings.core.entities.user_settings import UserSettings
from domain.user_settings.core.ports.repository import IUserSettingsRepository
from domain.user_settings.core.value_objects.daily_preference import DailyPreference

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class UpdateUserSettingsCommand:
    """Command to update tenant settings.

    Attributes:
        tenant_id: Tenant identifier
        week_start_day: New week start day (unchanged if None)
        daily_preferences: Full replacement of the 7 entries (unchanged if None)
    """

    tenant_id: str
    week_start_day: Optional[Union[WeekStartDay, str]] = None
    daily_preferences: Optional[Sequence[Union[DailyPreference, Mapping[str, Any]]]] = None


class UpdateUserSettingsHandler:
    """Handler for UpdateUserSettingsCommand.

    Settings are created with defaults first when the tenant has none.
    Both fields are validated before anything is saved.
    """

    def __init__(self, repository: IUserSettingsRepository):
        self._repository = repository

    async def handle(self, command: UpdateUserSettingsCommand) -> UserSettings:
        """
        Handle settings update.

        Returns:
            UserSettings: Saved settings

        Raises:
            ValidationError: If week start day or preferences are invalid
        """
        settings = await self._repository.find_by_tenant_id(command.tenant_id)
        if settings is None:
            settings = UserSettings.create(command.tenant_id)

        if command.week_start_day is not None:
            settings.update_week_start_day(command.week_start_day)

        if command.daily_preferences is not None:
            settings.update_daily_preferences(command.daily_preferences)

        saved = await self._repository.save(settings)

        logger.info(
            "User settings updated",
            tenant_id=command.tenant_id,
            week_start_day=saved.week_start_day.value,
        )
        return saved
