"""IUserSettingsRepository port - tenant preference store."""

from abc import ABC, abstractmethod
from typing import Optional

from ..entities.user_settings import UserSettings


class IUserSettingsRepository(ABC):
    """Port for tenant settings persistence.

    One settings document per tenant. Reads always go to the store; no
    process-wide cache sits in front of it.
    """

    @abstractmethod
    async def find_by_tenant_id(self, tenant_id: str) -> Optional[UserSettings]:
        """Find settings of a tenant.

        Returns:
            Optional[UserSettings]: Settings if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, settings: UserSettings) -> UserSettings:
        """Save settings (create or update).

        Returns:
            UserSettings: Stored settings
        """
        pass
