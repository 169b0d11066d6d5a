"""Tests for planned week commands."""

from datetime import date
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio

from application.planned_week.commands import (
    AssignMealToDayCommand,
    AssignMealToDayHandler,
    CreatePlannedWeekCommand,
    CreatePlannedWeekHandler,
    DeletePlannedWeekCommand,
    DeletePlannedWeekHandler,
    PopulateLeftoversCommand,
    PopulateLeftoversHandler,
)
from domain.planned_week.core.entities.planned_week import PlannedWeek
from domain.planned_week.core.value_objects.meal_assignment import MealAssignment
from domain.shared.errors import AlignmentError, ConflictError, NotFoundError
from domain.shared.value_objects import MealSlot, WeekStartDay
from domain.user_settings.core.entities.user_settings import UserSettings
from infrastructure.persistence.in_memory.planned_week_repository import (
    InMemoryPlannedWeekRepository,
)
from infrastructure.persistence.in_memory.user_settings_repository import (
    InMemoryUserSettingsRepository,
)


@pytest.fixture
def repository():
    return InMemoryPlannedWeekRepository()


@pytest.fixture
def settings_repository():
    return InMemoryUserSettingsRepository()


@pytest.fixture
def create_handler(repository, settings_repository):
    return CreatePlannedWeekHandler(repository, settings_repository)


@pytest_asyncio.fixture
async def week(create_handler):
    """Saved Monday week for tenant-1."""
    return await create_handler.handle(
        CreatePlannedWeekCommand(tenant_id="tenant-1", starting_date="2025-01-06")
    )


# ============================================================
# CreatePlannedWeek
# ============================================================


@pytest.mark.asyncio
async def test_create_defaults_to_monday_without_settings(create_handler, repository):
    week = await create_handler.handle(
        CreatePlannedWeekCommand(tenant_id="tenant-1", starting_date="2025-01-06")
    )

    assert week.week_start_day is WeekStartDay.MONDAY
    assert week.starting_date == date(2025, 1, 6)
    assert await repository.find_by_id(week.id, "tenant-1") is not None


@pytest.mark.asyncio
async def test_create_uses_tenant_week_start_day(create_handler, settings_repository):
    await settings_repository.save(UserSettings.create("tenant-1", WeekStartDay.SUNDAY))

    week = await create_handler.handle(
        CreatePlannedWeekCommand(tenant_id="tenant-1", starting_date="2025-01-05")
    )

    assert week.week_start_day is WeekStartDay.SUNDAY


@pytest.mark.asyncio
async def test_create_misaligned_with_tenant_setting_raises(create_handler, settings_repository):
    await settings_repository.save(UserSettings.create("tenant-1", WeekStartDay.SATURDAY))

    with pytest.raises(AlignmentError):
        await create_handler.handle(
            CreatePlannedWeekCommand(tenant_id="tenant-1", starting_date="2025-01-06")
        )


@pytest.mark.asyncio
async def test_create_explicit_week_start_overrides_settings(create_handler, settings_repository):
    await settings_repository.save(UserSettings.create("tenant-1", WeekStartDay.SUNDAY))

    week = await create_handler.handle(
        CreatePlannedWeekCommand(
            tenant_id="tenant-1", starting_date="2025-01-04", week_start_day="SATURDAY"
        )
    )

    assert week.week_start_day is WeekStartDay.SATURDAY


@pytest.mark.asyncio
async def test_create_duplicate_start_date_raises(create_handler, week):
    with pytest.raises(ConflictError, match="already exists"):
        await create_handler.handle(
            CreatePlannedWeekCommand(tenant_id="tenant-1", starting_date="2025-01-06")
        )


@pytest.mark.asyncio
async def test_create_same_date_other_tenant_is_allowed(create_handler, week):
    other = await create_handler.handle(
        CreatePlannedWeekCommand(tenant_id="tenant-2", starting_date="2025-01-06")
    )

    assert other.id != week.id


# ============================================================
# AssignMealToDay
# ============================================================


@pytest.mark.asyncio
async def test_assign_dinner_populates_leftovers(repository, week):
    handler = AssignMealToDayHandler(repository)

    saved = await handler.handle(
        AssignMealToDayCommand(
            tenant_id="tenant-1",
            planned_week_id=week.id,
            date="2025-01-06",
            slot=MealSlot.DINNER,
            assignment=MealAssignment(meal_id="meal-dinner", makes_lunch=True),
        )
    )

    assert saved.get_day_plan("2025-01-07").lunch_meal_id == "meal-dinner"
    stored = await repository.find_by_id(week.id, "tenant-1")
    assert stored.get_day_plan("2025-01-07").is_leftover is True
    assert stored.dinner_assignment_for("2025-01-06").makes_lunch is True


@pytest.mark.asyncio
async def test_assign_lunch_does_not_recompute():
    week = PlannedWeek.create("tenant-1", "2025-01-06", WeekStartDay.MONDAY, id="week-1")
    week.assign_meal("2025-01-06", MealSlot.DINNER, MealAssignment("m1", makes_lunch=True))
    repository = AsyncMock()
    repository.find_by_id.return_value = week
    repository.save.side_effect = lambda saved: saved

    handler = AssignMealToDayHandler(repository)
    saved = await handler.handle(
        AssignMealToDayCommand(
            tenant_id="tenant-1",
            planned_week_id="week-1",
            date="2025-01-09",
            slot="lunch",
            assignment=MealAssignment(meal_id="manual"),
        )
    )

    assert saved.get_day_plan("2025-01-09").lunch_meal_id == "manual"
    assert saved.get_day_plan("2025-01-07").lunch_meal_id is None
    repository.save.assert_awaited_once()


@pytest.mark.asyncio
async def test_remove_dinner_clears_leftover(repository, week):
    handler = AssignMealToDayHandler(repository)
    base = dict(tenant_id="tenant-1", planned_week_id=week.id, date="2025-01-06", slot="dinner")

    await handler.handle(AssignMealToDayCommand(**base, assignment=MealAssignment("m1", True)))
    saved = await handler.handle(AssignMealToDayCommand(**base, assignment=None))

    plan = saved.get_day_plan("2025-01-07")
    assert plan.lunch_meal_id is None
    assert plan.is_leftover is False


@pytest.mark.asyncio
async def test_assign_missing_week_raises(repository):
    handler = AssignMealToDayHandler(repository)

    with pytest.raises(NotFoundError, match="planned week not found"):
        await handler.handle(
            AssignMealToDayCommand(
                tenant_id="tenant-1",
                planned_week_id="missing",
                date="2025-01-06",
                slot="dinner",
                assignment=MealAssignment("m1"),
            )
        )


@pytest.mark.asyncio
async def test_assign_other_tenant_week_raises(repository, week):
    handler = AssignMealToDayHandler(repository)

    with pytest.raises(NotFoundError):
        await handler.handle(
            AssignMealToDayCommand(
                tenant_id="tenant-2",
                planned_week_id=week.id,
                date="2025-01-06",
                slot="dinner",
                assignment=MealAssignment("m1"),
            )
        )


@pytest.mark.asyncio
async def test_assign_date_outside_week_does_not_save():
    repository = AsyncMock()
    repository.find_by_id.return_value = PlannedWeek.create(
        "tenant-1", "2025-01-06", WeekStartDay.MONDAY, id="week-1"
    )

    handler = AssignMealToDayHandler(repository)
    with pytest.raises(NotFoundError, match="date not in planned week"):
        await handler.handle(
            AssignMealToDayCommand(
                tenant_id="tenant-1",
                planned_week_id="week-1",
                date="2025-02-01",
                slot="lunch",
                assignment=MealAssignment("m1"),
            )
        )

    repository.save.assert_not_awaited()


# ============================================================
# PopulateLeftovers / DeletePlannedWeek
# ============================================================


@pytest.mark.asyncio
async def test_populate_leftovers_persists(repository, week):
    week.assign_meal("2025-01-08", MealSlot.DINNER, MealAssignment("m1", makes_lunch=True))
    await repository.save(week)

    handler = PopulateLeftoversHandler(repository)
    await handler.handle(PopulateLeftoversCommand(tenant_id="tenant-1", planned_week_id=week.id))

    stored = await repository.find_by_id(week.id, "tenant-1")
    assert stored.get_day_plan("2025-01-09").lunch_meal_id == "m1"


@pytest.mark.asyncio
async def test_populate_leftovers_missing_week_raises(repository):
    handler = PopulateLeftoversHandler(repository)

    with pytest.raises(NotFoundError):
        await handler.handle(PopulateLeftoversCommand(tenant_id="tenant-1", planned_week_id="x"))


@pytest.mark.asyncio
async def test_delete_removes_week(repository, week):
    handler = DeletePlannedWeekHandler(repository)

    await handler.handle(DeletePlannedWeekCommand(tenant_id="tenant-1", planned_week_id=week.id))

    assert await repository.find_by_id(week.id, "tenant-1") is None


@pytest.mark.asyncio
async def test_delete_missing_week_raises(repository):
    handler = DeletePlannedWeekHandler(repository)

    with pytest.raises(NotFoundError):
        await handler.handle(DeletePlannedWeekCommand(tenant_id="tenant-1", planned_week_id="x"))
