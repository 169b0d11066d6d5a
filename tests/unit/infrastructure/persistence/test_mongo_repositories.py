"""Unit tests for MongoDB repositories with a mocked motor collection."""

from datetime import date
from unittest.mock import AsyncMock, MagicMock

import pytest
from pymongo.errors import DuplicateKeyError

from domain.meal.core.entities.meal import Meal
from domain.planned_week.core.entities.planned_week import PlannedWeek
from domain.planned_week.core.value_objects.meal_assignment import MealAssignment
from domain.shared.errors import ConflictError
from domain.shared.value_objects import DayOfWeek, MealSlot, ShortDay, WeekStartDay
from domain.user_settings.core.entities.user_settings import UserSettings
from infrastructure.persistence.mongodb import (
    MongoMealRepository,
    MongoPlannedWeekRepository,
    MongoUserSettingsRepository,
)
from infrastructure.persistence.mongodb.meal_repository import build_qualities_query


@pytest.fixture
def collection():
    """Motor collection double."""
    collection = MagicMock()
    collection.find_one = AsyncMock(return_value=None)
    collection.insert_one = AsyncMock()
    collection.update_one = AsyncMock(return_value=MagicMock(modified_count=1))
    collection.delete_one = AsyncMock(return_value=MagicMock(deleted_count=1))
    collection.count_documents = AsyncMock(return_value=0)
    collection.create_index = AsyncMock()

    cursor = MagicMock()
    cursor.sort.return_value = cursor
    cursor.skip.return_value = cursor
    cursor.limit.return_value = cursor
    cursor.to_list = AsyncMock(return_value=[])
    collection.find.return_value = cursor
    return collection


@pytest.fixture
def client(collection):
    db = MagicMock()
    db.__getitem__ = MagicMock(return_value=collection)
    client = MagicMock()
    client.__getitem__ = MagicMock(return_value=db)
    return client


@pytest.fixture
def planned_week() -> PlannedWeek:
    week = PlannedWeek.create("tenant-1", "2025-01-06", WeekStartDay.MONDAY, id="week-1")
    week.assign_meal("2025-01-06", MealSlot.DINNER, MealAssignment("m1", makes_lunch=True))
    week.populate_leftovers()
    return week


class TestMongoPlannedWeekRepository:
    """Test MongoPlannedWeekRepository."""

    def test_document_round_trip(self, client, planned_week):
        repository = MongoPlannedWeekRepository(client=client)

        document = repository.to_document(planned_week)
        restored = repository.from_document(document)

        assert document["_id"] == "week-1"
        assert document["starting_date"] == "2025-01-06"
        assert document["dinner_assignments"] == {
            "2025-01-06": {"meal_id": "m1", "makes_lunch": True}
        }
        assert document["day_plans"][1]["is_leftover"] is True
        assert restored.to_snapshot() == planned_week.to_snapshot()

    def test_legacy_document_without_assignments(self, client, planned_week):
        repository = MongoPlannedWeekRepository(client=client)
        document = repository.to_document(planned_week)
        del document["dinner_assignments"]

        restored = repository.from_document(document)

        assert restored.dinner_assignment_for(date(2025, 1, 6)).makes_lunch is False

    def test_stored_weekday_labels_are_ignored(self, client, planned_week):
        repository = MongoPlannedWeekRepository(client=client)
        document = repository.to_document(planned_week)
        document["day_plans"][0]["long_day"] = "FRIDAY"
        document["day_plans"][0]["short_day"] = "SUN"

        restored = repository.from_document(document)

        plan = restored.get_day_plan("2025-01-06")
        assert plan.long_day is DayOfWeek.MONDAY
        assert plan.short_day is ShortDay.MON

    @pytest.mark.asyncio
    async def test_create_inserts_document(self, client, collection, planned_week):
        repository = MongoPlannedWeekRepository(client=client)

        await repository.create(planned_week)

        collection.insert_one.assert_awaited_once()
        assert collection.insert_one.await_args.args[0]["tenant_id"] == "tenant-1"

    @pytest.mark.asyncio
    async def test_create_duplicate_raises_conflict(self, client, collection, planned_week):
        collection.insert_one.side_effect = DuplicateKeyError("E11000 duplicate key")
        repository = MongoPlannedWeekRepository(client=client)

        with pytest.raises(ConflictError, match="already exists for this start date"):
            await repository.create(planned_week)

    @pytest.mark.asyncio
    async def test_store_errors_are_reraised(self, client, collection):
        collection.find_one.side_effect = RuntimeError("connection lost")
        repository = MongoPlannedWeekRepository(client=client)

        with pytest.raises(RuntimeError, match="connection lost"):
            await repository.find_by_id("week-1", "tenant-1")

    @pytest.mark.asyncio
    async def test_save_upserts_whole_document(self, client, collection, planned_week):
        repository = MongoPlannedWeekRepository(client=client)

        await repository.save(planned_week)

        filter_dict, update_dict = collection.update_one.await_args.args
        assert filter_dict == {"_id": "week-1", "tenant_id": "tenant-1"}
        assert len(update_dict["$set"]["day_plans"]) == 7
        assert collection.update_one.await_args.kwargs == {"upsert": True}

    @pytest.mark.asyncio
    async def test_find_by_id_scopes_tenant(self, client, collection, planned_week):
        repository = MongoPlannedWeekRepository(client=client)
        collection.find_one.return_value = repository.to_document(planned_week)

        found = await repository.find_by_id("week-1", "tenant-1")

        collection.find_one.assert_awaited_once_with({"_id": "week-1", "tenant_id": "tenant-1"}, None)
        assert found.get_day_plan("2025-01-07").lunch_meal_id == "m1"

    @pytest.mark.asyncio
    async def test_find_all_builds_range_query(self, client, collection, planned_week):
        repository = MongoPlannedWeekRepository(client=client)
        collection.count_documents.return_value = 5
        collection.find.return_value.to_list.return_value = [repository.to_document(planned_week)]

        items, total = await repository.find_all(
            "tenant-1", start_date=date(2025, 1, 1), end_date=date(2025, 2, 1), limit=1, offset=2
        )

        expected_filter = {
            "tenant_id": "tenant-1",
            "starting_date": {"$gte": "2025-01-01", "$lte": "2025-02-01"},
        }
        collection.count_documents.assert_awaited_once_with(expected_filter)
        assert collection.find.call_args.args[0] == expected_filter
        assert total == 5
        assert [week.id for week in items] == ["week-1"]

    @pytest.mark.asyncio
    async def test_delete(self, client, collection):
        repository = MongoPlannedWeekRepository(client=client)

        await repository.delete("week-1", "tenant-1")

        collection.delete_one.assert_awaited_once_with({"_id": "week-1", "tenant_id": "tenant-1"})

    @pytest.mark.asyncio
    async def test_ensure_indexes(self, client, collection):
        repository = MongoPlannedWeekRepository(client=client)

        await repository.ensure_indexes()

        assert collection.create_index.await_args.kwargs["unique"] is True


class TestMongoMealRepository:
    """Test MongoMealRepository."""

    def test_build_qualities_query(self):
        query = build_qualities_query(
            "tenant-1", {"is_archived": False, "is_lunch": True, "green_veg": True}
        )

        assert query == {
            "tenant_id": "tenant-1",
            "archived_at": None,
            "qualities.is_lunch": True,
            "qualities.green_veg": True,
        }

    def test_build_qualities_query_archived(self):
        assert build_qualities_query("t", {"is_archived": True})["archived_at"] == {"$ne": None}

    def test_document_round_trip(self, client):
        repository = MongoMealRepository(client=client)
        meal = Meal.create("tenant-1", "Risotto", is_creamy=True)
        meal.archive()

        restored = repository.from_document(repository.to_document(meal))

        assert restored.id == meal.id
        assert restored.qualities == meal.qualities
        assert restored.archived_at == meal.archived_at

    @pytest.mark.asyncio
    async def test_find_by_qualities_returns_summaries(self, client, collection):
        collection.find.return_value.to_list.return_value = [
            {"_id": "meal-1", "name": "Salad", "qualities": {"is_lunch": True}}
        ]
        repository = MongoMealRepository(client=client)

        result = await repository.find_by_qualities("tenant-1", {"is_archived": False})

        assert result[0].id == "meal-1"
        assert result[0].meal_name == "Salad"
        assert result[0].qualities["is_lunch"] is True
        assert result[0].qualities["is_dinner"] is True

    @pytest.mark.asyncio
    async def test_save_filters_by_tenant(self, client, collection):
        repository = MongoMealRepository(client=client)
        meal = Meal.create("tenant-1", "Risotto")

        await repository.save(meal)

        filter_dict = collection.update_one.await_args.args[0]
        assert filter_dict == {"_id": meal.id, "tenant_id": "tenant-1"}

    @pytest.mark.asyncio
    async def test_save_with_foreign_id_raises_conflict(self, client, collection):
        collection.update_one.side_effect = DuplicateKeyError("E11000 duplicate key")
        repository = MongoMealRepository(client=client)

        with pytest.raises(ConflictError, match="meal already exists"):
            await repository.save(Meal.create("tenant-2", "Risotto"))

    @pytest.mark.asyncio
    async def test_find_all_builds_query(self, client, collection):
        repository = MongoMealRepository(client=client)
        meal = Meal.create("tenant-1", "Tomato (fresh) soup", is_lunch=True)
        collection.count_documents.return_value = 3
        collection.find.return_value.to_list.return_value = [repository.to_document(meal)]

        items, total = await repository.find_all(
            "tenant-1", name="(fresh)", qualities={"is_lunch": True}, limit=10, offset=20
        )

        expected_filter = {
            "tenant_id": "tenant-1",
            "qualities.is_lunch": True,
            "archived_at": None,
            "name": {"$regex": r"\(fresh\)", "$options": "i"},
        }
        collection.count_documents.assert_awaited_once_with(expected_filter)
        assert collection.find.call_args.args[0] == expected_filter
        collection.find.return_value.skip.assert_called_once_with(20)
        assert total == 3
        assert [found.id for found in items] == [meal.id]

    @pytest.mark.asyncio
    async def test_find_all_including_archived(self, client, collection):
        repository = MongoMealRepository(client=client)

        await repository.find_all("tenant-1", include_archived=True)

        assert collection.find.call_args.args[0] == {"tenant_id": "tenant-1"}


class TestMongoUserSettingsRepository:
    """Test MongoUserSettingsRepository."""

    def test_document_round_trip(self, client):
        repository = MongoUserSettingsRepository(client=client)
        settings = UserSettings.create("tenant-1", WeekStartDay.SATURDAY)
        settings.update_daily_preferences(
            [
                {"day": entry.day.value, "preferences": {"is_acidic": True}}
                for entry in settings.daily_preferences
            ]
        )

        document = repository.to_document(settings)
        restored = repository.from_document(document)

        assert document["week_start_day"] == "SATURDAY"
        assert document["daily_preferences"][0]["preferences"] == {"is_acidic": True}
        assert restored.daily_preferences == settings.daily_preferences

    @pytest.mark.asyncio
    async def test_save_upserts_by_tenant(self, client, collection):
        repository = MongoUserSettingsRepository(client=client)
        settings = UserSettings.create("tenant-1")

        await repository.save(settings)

        filter_dict, update_dict = collection.update_one.await_args.args
        assert filter_dict == {"tenant_id": "tenant-1"}
        assert "_id" not in update_dict["$set"]
        assert update_dict["$setOnInsert"] == {"_id": settings.id}

    @pytest.mark.asyncio
    async def test_ensure_indexes_unique_tenant(self, client, collection):
        repository = MongoUserSettingsRepository(client=client)

        await repository.ensure_indexes()

        assert collection.create_index.await_args.args[0] == [("tenant_id", 1)]
        assert collection.create_index.await_args.kwargs["unique"] is True


def test_missing_uri_without_client_raises(monkeypatch):
    monkeypatch.delenv("MONGODB_URI", raising=False)

    with pytest.raises(ValueError, match="MONGODB_URI not configured"):
        MongoPlannedWeekRepository()
