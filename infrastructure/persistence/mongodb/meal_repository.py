"""MongoDB implementation of IMealRepository."""

import re
from typing import Any, Dict, List, Optional, Tuple

from pymongo import ASCENDING

from domain.meal.core.entities.meal import Meal
from domain.meal.core.ports.meal_repository import IMealRepository, MealQualitiesFilter
from domain.meal.core.value_objects.meal_summary import MealSummary
from domain.meal.core.value_objects.quality_flags import QualityFlags

from .base import MongoBaseRepository


class MongoMealRepository(MongoBaseRepository[Meal], IMealRepository):
    """MongoDB implementation of the meal catalog."""

    @property
    def collection_name(self) -> str:
        return "meals"

    @property
    def duplicate_key_message(self) -> str:
        return "meal already exists"

    async def ensure_indexes(self) -> None:
        """Create the (tenant_id, name) listing index."""
        await self.collection.create_index(
            [("tenant_id", ASCENDING), ("name", ASCENDING)],
            name="tenant_name",
        )

    def to_document(self, entity: Meal) -> Dict[str, Any]:
        """Convert Meal entity to MongoDB document."""
        meal = entity
        return {
            "_id": meal.id,
            "tenant_id": meal.tenant_id,
            "name": meal.name,
            "qualities": meal.qualities.to_dict(),
            "archived_at": (
                self.datetime_to_iso(meal.archived_at) if meal.archived_at else None
            ),
            "created_at": self.datetime_to_iso(meal.created_at),
            "updated_at": self.datetime_to_iso(meal.updated_at),
        }

    def from_document(self, doc: Dict[str, Any]) -> Meal:
        """Convert MongoDB document to Meal entity."""
        archived_at = doc.get("archived_at")
        return Meal(
            id=doc["_id"],
            tenant_id=doc["tenant_id"],
            name=doc["name"],
            qualities=QualityFlags.from_dict(doc.get("qualities", {})),
            archived_at=self.iso_to_datetime(archived_at) if archived_at else None,
            created_at=self.iso_to_datetime(doc["created_at"]),
            updated_at=self.iso_to_datetime(doc["updated_at"]),
        )

    async def save(self, meal: Meal) -> None:
        """
        Save meal (create or update) within its tenant.

        Raises:
            ConflictError: If the id is taken by another tenant's meal
        """
        document = self.to_document(meal)
        await self._update_one(
            {"_id": document["_id"], "tenant_id": meal.tenant_id},
            {"$set": document},
            upsert=True,
        )

    async def find_by_id(self, meal_id: str, tenant_id: str) -> Optional[Meal]:
        doc = await self._find_one({"_id": meal_id, "tenant_id": tenant_id})
        if doc is None:
            return None
        return self.from_document(doc)

    async def find_by_qualities(
        self, tenant_id: str, meal_filter: MealQualitiesFilter
    ) -> List[MealSummary]:
        """Find meals matching every filter key, ordered by name."""
        docs = await self._find_many(
            build_qualities_query(tenant_id, meal_filter),
            sort=[("name", ASCENDING)],
            projection={"_id": 1, "name": 1, "qualities": 1},
        )
        return [
            MealSummary(
                id=doc["_id"],
                meal_name=doc["name"],
                qualities=QualityFlags.from_dict(doc.get("qualities", {})).to_dict(),
            )
            for doc in docs
        ]

    async def find_all(
        self,
        tenant_id: str,
        name: Optional[str] = None,
        qualities: Optional[MealQualitiesFilter] = None,
        include_archived: bool = False,
        limit: int = 50,
        offset: int = 0,
    ) -> Tuple[List[Meal], int]:
        query = build_qualities_query(tenant_id, qualities or {})
        if not include_archived:
            query["archived_at"] = None
        if name:
            query["name"] = {"$regex": re.escape(name), "$options": "i"}

        total = await self._count(query)
        docs = await self._find_many(
            query,
            sort=[("name", ASCENDING)],
            limit=limit,
            skip=offset,
        )
        return [self.from_document(doc) for doc in docs], total


def build_qualities_query(tenant_id: str, meal_filter: MealQualitiesFilter) -> Dict[str, Any]:
    """
    Translate a meal filter into a MongoDB query.

    Example:
        >>> build_qualities_query("t1", {"is_archived": False, "is_lunch": True})
        {'tenant_id': 't1', 'archived_at': None, 'qualities.is_lunch': True}
    """
    query: Dict[str, Any] = {"tenant_id": tenant_id}
    for key, expected in meal_filter.items():
        if key == "is_archived":
            query["archived_at"] = {"$ne": None} if expected else None
        else:
            query[f"qualities.{key}"] = expected
    return query
