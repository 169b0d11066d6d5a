"""Core value objects for user settings domain."""

from .daily_preference import DailyPreference, QualityPreferences

__all__ = ["DailyPreference", "QualityPreferences"]
