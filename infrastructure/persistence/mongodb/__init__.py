"""MongoDB repository implementations."""

from .base import MongoBaseRepository
from .meal_repository import MongoMealRepository
from .planned_week_repository import MongoPlannedWeekRepository
from .user_settings_repository import MongoUserSettingsRepository

__all__ = [
    "MongoBaseRepository",
    "MongoMealRepository",
    "MongoPlannedWeekRepository",
    "MongoUserSettingsRepository",
]
