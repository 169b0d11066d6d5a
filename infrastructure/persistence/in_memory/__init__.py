"""In-memory persistence implementations."""

from infrastructure.persistence.in_memory.meal_repository import InMemoryMealRepository
from infrastructure.persistence.in_memory.planned_week_repository import (
    InMemoryPlannedWeekRepository,
)
from infrastructure.persistence.in_memory.user_settings_repository import (
    InMemoryUserSettingsRepository,
)

__all__ = [
    "InMemoryMealRepository",
    "InMemoryPlannedWeekRepository",
    "InMemoryUserSettingsRepository",
]
