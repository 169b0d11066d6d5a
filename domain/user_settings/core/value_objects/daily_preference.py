"""
Daily preference value objects.

A tenant states, per weekday, which meal qualities it wants. A flag set
to True narrows the eligible meals; an absent or False flag does not
constrain them.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool

from domain.shared.value_objects.day_of_week import DayOfWeek


class QualityPreferences(BaseModel):
    """
    Per-day quality preferences.

    Strict booleans only; unknown keys are rejected.

    Example:
        >>> prefs = QualityPreferences(is_creamy=True)
        >>> prefs.required_flags()
        ['is_creamy']
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    is_creamy: Optional[StrictBool] = None
    is_acidic: Optional[StrictBool] = None
    green_veg: Optional[StrictBool] = None
    is_easy_to_make: Optional[StrictBool] = None
    needs_prep: Optional[StrictBool] = None

    def required_flags(self) -> list[str]:
        """Flags explicitly set to True, in declaration order."""
        return [name for name, value in self if value is True]


class DailyPreference(BaseModel):
    """
    Preferences for one weekday.

    Example:
        >>> entry = DailyPreference(
        ...     day=DayOfWeek.MONDAY,
        ...     preferences=QualityPreferences(green_veg=True),
        ... )
        >>> entry.day
        <DayOfWeek.MONDAY: 'MONDAY'>
    """

    model_config = ConfigDict(frozen=True)

    day: DayOfWeek
    preferences: QualityPreferences = Field(default_factory=QualityPreferences)
