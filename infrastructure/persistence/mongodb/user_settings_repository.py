"""MongoDB implementation of IUserSettingsRepository."""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pymongo import ASCENDING

from domain.user_settings.core.entities.user_settings import UserSettings
from domain.user_settings.core.ports.repository import IUserSettingsRepository
from domain.user_settings.core.value_objects.daily_preference import DailyPreference

from .base import MongoBaseRepository


class MongoUserSettingsRepository(MongoBaseRepository[UserSettings], IUserSettingsRepository):
    """MongoDB implementation of tenant settings (one document per tenant)."""

    @property
    def collection_name(self) -> str:
        return "user_settings"

    @property
    def duplicate_key_message(self) -> str:
        return "user settings already exist for this tenant"

    async def ensure_indexes(self) -> None:
        """Create the unique tenant_id index."""
        await self.collection.create_index(
            [("tenant_id", ASCENDING)], unique=True, name="tenant_id_unique"
        )

    def to_document(self, entity: UserSettings) -> Dict[str, Any]:
        settings = entity
        return {
            "_id": settings.id,
            "tenant_id": settings.tenant_id,
            "week_start_day": settings.week_start_day.value,
            "daily_preferences": [
                entry.model_dump(mode="json", exclude_none=True)
                for entry in settings.daily_preferences
            ],
            "created_at": self.datetime_to_iso(settings.created_at),
            "updated_at": self.datetime_to_iso(settings.updated_at),
        }

    def from_document(self, doc: Dict[str, Any]) -> UserSettings:
        return UserSettings(
            id=doc["_id"],
            tenant_id=doc["tenant_id"],
            week_start_day=doc["week_start_day"],
            daily_preferences=[
                DailyPreference.model_validate(entry) for entry in doc["daily_preferences"]
            ],
            created_at=self.iso_to_datetime(doc["created_at"]),
            updated_at=self.iso_to_datetime(doc["updated_at"]),
        )

    async def find_by_tenant_id(self, tenant_id: str) -> Optional[UserSettings]:
        doc = await self._find_one({"tenant_id": tenant_id})
        if doc is None:
            return None
        return self.from_document(doc)

    async def save(self, settings: UserSettings) -> UserSettings:
        """Upsert the tenant's settings document.

        ``_id`` is only written on insert; a settings document that already
        exists for the tenant keeps its id.
        """
        settings.updated_at = datetime.now(timezone.utc)
        document = self.to_document(settings)
        document_id = document.pop("_id")
        await self._update_one(
            {"tenant_id": settings.tenant_id},
            {"$set": document, "$setOnInsert": {"_id": document_id}},
            upsert=True,
        )
        return settings
