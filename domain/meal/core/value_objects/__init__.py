"""Core value objects for meal domain."""

from .meal_summary import MealSummary
from .quality_flags import DAILY_PREFERENCE_KEYS, QUALITY_FLAG_KEYS, QualityFlags

__all__ = [
    "DAILY_PREFERENCE_KEYS",
    "MealSummary",
    "QUALITY_FLAG_KEYS",
    "QualityFlags",
]
