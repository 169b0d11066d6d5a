"""GetUserSettingsQuery - load a tenant's settings, creating defaults on first access."""

from dataclasses import dataclass

import structlog

from domain.user_settings.core.entities.user_settings import UserSettings
from domain.user_settings.core.ports.repository import IUserSettingsRepository

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class GetUserSettingsQuery:
    """Query to retrieve tenant settings.

    Attributes:
        tenant_id: Tenant identifier
    """

    tenant_id: str


class GetUserSettingsQueryHandler:
    """Handler for GetUserSettingsQuery.

    Tenants without settings get the defaults (week starts on MONDAY, no
    daily preferences), which are persisted so later reads are stable.
    """

    def __init__(self, repository: IUserSettingsRepository):
        self._repository = repository

    async def handle(self, query: GetUserSettingsQuery) -> UserSettings:
        settings = await self._repository.find_by_tenant_id(query.tenant_id)
        if settings is not None:
            return settings

        settings = await self._repository.save(UserSettings.create(query.tenant_id))
        logger.info("Default user settings created", tenant_id=query.tenant_id)
        return settings
