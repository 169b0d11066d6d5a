"""MongoDB implementation of IPlannedWeekRepository.

One document per planned week with embedded day plans and the captured
dinner assignment map keyed by ISO date. A unique index on
(tenant_id, starting_date) backs the one-week-per-start-date rule.
"""

from datetime import date
from typing import Any, Dict, List, Optional, Tuple

import structlog
from pymongo import ASCENDING

from domain.planned_week.core.entities.day_plan import DayPlan
from domain.planned_week.core.entities.planned_week import PlannedWeek
from domain.planned_week.core.entities.planned_week_snapshot import PlannedWeekSnapshot
from domain.planned_week.core.ports.repository import IPlannedWeekRepository
from domain.planned_week.core.value_objects.meal_assignment import MealAssignment
from domain.shared.value_objects.week_start_day import WeekStartDay

from .base import MongoBaseRepository

logger = structlog.get_logger(__name__)


class MongoPlannedWeekRepository(MongoBaseRepository[PlannedWeek], IPlannedWeekRepository):
    """MongoDB implementation of planned week repository."""

    @property
    def collection_name(self) -> str:
        return "planned_weeks"

    @property
    def duplicate_key_message(self) -> str:
        return "planned week already exists for this start date"

    async def ensure_indexes(self) -> None:
        """Create the unique (tenant_id, starting_date) index."""
        await self.collection.create_index(
            [("tenant_id", ASCENDING), ("starting_date", ASCENDING)],
            unique=True,
            name="tenant_starting_date_unique",
        )

    def to_document(self, entity: PlannedWeek) -> Dict[str, Any]:
        """Convert PlannedWeek aggregate to MongoDB document."""
        snapshot = entity.to_snapshot()
        return {
            "_id": snapshot.id,
            "tenant_id": snapshot.tenant_id,
            "starting_date": self.date_to_iso(snapshot.starting_date),
            "week_start_day": snapshot.week_start_day.value,
            "day_plans": [
                {
                    "date": self.date_to_iso(plan.date),
                    "long_day": plan.long_day.value,
                    "short_day": plan.short_day.value,
                    "lunch_meal_id": plan.lunch_meal_id,
                    "dinner_meal_id": plan.dinner_meal_id,
                    "is_leftover": plan.is_leftover,
                }
                for plan in snapshot.day_plans
            ],
            "dinner_assignments": {
                self.date_to_iso(day): {
                    "meal_id": assignment.meal_id,
                    "makes_lunch": assignment.makes_lunch,
                }
                for day, assignment in (snapshot.dinner_assignments or {}).items()
            },
        }

    def from_document(self, doc: Dict[str, Any]) -> PlannedWeek:
        """Convert MongoDB document to PlannedWeek aggregate.

        Documents without ``dinner_assignments`` rehydrate with
        ``makes_lunch=False`` for every dinner. Stored weekday labels are
        ignored; day plans derive them from their date.
        """
        raw_assignments = doc.get("dinner_assignments")
        snapshot = PlannedWeekSnapshot(
            id=doc["_id"],
            tenant_id=doc["tenant_id"],
            starting_date=self.iso_to_date(doc["starting_date"]),
            week_start_day=WeekStartDay(doc["week_start_day"]),
            day_plans=tuple(
                DayPlan(
                    date=self.iso_to_date(plan["date"]),
                    lunch_meal_id=plan.get("lunch_meal_id"),
                    dinner_meal_id=plan.get("dinner_meal_id"),
                    is_leftover=plan.get("is_leftover", False),
                )
                for plan in doc["day_plans"]
            ),
            dinner_assignments=(
                {
                    self.iso_to_date(day): MealAssignment(
                        meal_id=value["meal_id"],
                        makes_lunch=value.get("makes_lunch", False),
                    )
                    for day, value in raw_assignments.items()
                }
                if raw_assignments is not None
                else None
            ),
        )
        return PlannedWeek.rehydrate(snapshot)

    async def create(self, week: PlannedWeek) -> PlannedWeek:
        """
        Insert a new planned week.

        Raises:
            ConflictError: If the tenant already has a week on that date
        """
        await self._insert_one(self.to_document(week))
        logger.info("Planned week inserted", tenant_id=week.tenant_id, planned_week_id=week.id)
        return week

    async def save(self, week: PlannedWeek) -> PlannedWeek:
        """Upsert the whole aggregate in one write."""
        document = self.to_document(week)
        await self._update_one(
            {"_id": document["_id"], "tenant_id": week.tenant_id},
            {"$set": document},
            upsert=True,
        )
        return week

    async def find_by_id(self, week_id: str, tenant_id: str) -> Optional[PlannedWeek]:
        doc = await self._find_one({"_id": week_id, "tenant_id": tenant_id})
        if doc is None:
            return None
        return self.from_document(doc)

    async def find_by_tenant_and_start_date(
        self, tenant_id: str, starting_date: date
    ) -> Optional[PlannedWeek]:
        doc = await self._find_one(
            {"tenant_id": tenant_id, "starting_date": self.date_to_iso(starting_date)}
        )
        if doc is None:
            return None
        return self.from_document(doc)

    async def find_all(
        self,
        tenant_id: str,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> Tuple[List[PlannedWeek], int]:
        """List weeks by starting date; ISO dates sort chronologically."""
        filter_dict: Dict[str, Any] = {"tenant_id": tenant_id}
        date_range: Dict[str, str] = {}
        if start_date is not None:
            date_range["$gte"] = self.date_to_iso(start_date)
        if end_date is not None:
            date_range["$lte"] = self.date_to_iso(end_date)
        if date_range:
            filter_dict["starting_date"] = date_range

        total = await self._count(filter_dict)
        docs = await self._find_many(
            filter_dict,
            sort=[("starting_date", ASCENDING)],
            limit=limit,
            skip=offset,
        )
        return [self.from_document(doc) for doc in docs], total

    async def delete(self, week_id: str, tenant_id: str) -> None:
        await self._delete_one({"_id": week_id, "tenant_id": tenant_id})
