"""In-memory user settings repository implementation."""

from copy import deepcopy
from datetime import datetime, timezone
from typing import Dict, Optional

from domain.user_settings.core.entities.user_settings import UserSettings
from domain.user_settings.core.ports.repository import IUserSettingsRepository


class InMemoryUserSettingsRepository(IUserSettingsRepository):
    """
    In-memory implementation of IUserSettingsRepository.

    One entry per tenant, keyed by tenant_id. Deep copies in and out.
    """

    def __init__(self) -> None:
        self._storage: Dict[str, UserSettings] = {}

    async def find_by_tenant_id(self, tenant_id: str) -> Optional[UserSettings]:
        settings = self._storage.get(tenant_id)
        return deepcopy(settings) if settings is not None else None

    async def save(self, settings: UserSettings) -> UserSettings:
        settings.updated_at = datetime.now(timezone.utc)
        self._storage[settings.tenant_id] = deepcopy(settings)
        return deepcopy(settings)

    def clear(self) -> None:
        """Clear all settings (test utility)."""
        self._storage.clear()

    def count(self) -> int:
        return len(self._storage)
