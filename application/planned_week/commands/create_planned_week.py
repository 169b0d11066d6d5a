"""CreatePlannedWeekCommand - create a new planned week for a tenant."""

from dataclasses import dataclass
from typing import Optional, Union

import structlog

from domain.planned_week.core.entities.planned_week import PlannedWeek
from domain.planned_week.core.ports.repository import IPlannedWeekRepository
from domain.shared.errors import ConflictError
from domain.shared.value_objects.calendar_date import DateLike, parse_iso_date
from domain.shared.value_objects.week_start_day import WeekStartDay
from domain.user_settings.core.ports.repository import IUserSettingsRepository

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class CreatePlannedWeekCommand:
    """Command to create a planned week.

    Attributes:
        tenant_id: Tenant identifier
        starting_date: First day of the week (date or ISO string)
        week_start_day: Explicit week start; the tenant's configured value
            is used when omitted
    """

    tenant_id: str
    starting_date: DateLike
    week_start_day: Optional[Union[WeekStartDay, str]] = None


class CreatePlannedWeekHandler:
    """Handler for CreatePlannedWeekCommand.

    Creates a planned week by:
    1. Resolving the week start day (command, then tenant settings, then MONDAY)
    2. Rejecting a second week on the same starting date
    3. Building the aggregate (alignment checked by the factory)
    4. Persisting it
    """

    def __init__(
        self,
        repository: IPlannedWeekRepository,
        user_settings_repository: IUserSettingsRepository,
    ):
        self._repository = repository
        self._user_settings_repository = user_settings_repository

    async def handle(self, command: CreatePlannedWeekCommand) -> PlannedWeek:
        """
        Handle planned week creation.

        Returns:
            PlannedWeek: Created week

        Raises:
            InvalidInputError: If starting_date cannot be parsed
            AlignmentError: If starting_date is not on the week start day
            ConflictError: If the tenant already has a week on that date
        """
        starting_date = parse_iso_date(command.starting_date)
        week_start_day = await self._resolve_week_start_day(command)

        existing = await self._repository.find_by_tenant_and_start_date(
            command.tenant_id, starting_date
        )
        if existing is not None:
            raise ConflictError("planned week already exists for this start date")

        week = PlannedWeek.create(
            tenant_id=command.tenant_id,
            starting_date=starting_date,
            week_start_day=week_start_day,
        )
        created = await self._repository.create(week)

        logger.info(
            "Planned week created",
            tenant_id=command.tenant_id,
            planned_week_id=created.id,
            starting_date=starting_date.isoformat(),
            week_start_day=week_start_day.value,
        )
        return created

    async def _resolve_week_start_day(self, command: CreatePlannedWeekCommand) -> WeekStartDay:
        if command.week_start_day is not None:
            return WeekStartDay.parse(command.week_start_day)

        settings = await self._user_settings_repository.find_by_tenant_id(command.tenant_id)
        if settings is None:
            return WeekStartDay.MONDAY
        return settings.week_start_day
