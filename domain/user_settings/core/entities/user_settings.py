"""UserSettings entity - aggregate root for tenant planning settings."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Iterable, Mapping, Optional, Union
from uuid import uuid4

from pydantic import ValidationError as PydanticValidationError

from domain.shared.errors import ValidationError
from domain.shared.value_objects.day_of_week import DayOfWeek
from domain.shared.value_objects.week_start_day import WeekStartDay

from ..value_objects.daily_preference import DailyPreference

DailyPreferenceInput = Union[DailyPreference, Mapping[str, Any]]


@dataclass
class UserSettings:
    """Tenant planning settings.

    Holds the weekday planned weeks start on and one preference entry per
    weekday. The eligibility filter reads these on every request.

    Invariants:
    - Exactly 7 daily preference entries
    - Each DayOfWeek appears exactly once

    Attributes:
        id: Settings identifier
        tenant_id: Owning tenant
        week_start_day: Weekday planned weeks start on
        daily_preferences: One entry per weekday
        created_at: Creation timestamp
        updated_at: Last update timestamp
    """

    id: str
    tenant_id: str
    week_start_day: WeekStartDay
    daily_preferences: list[DailyPreference]
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        if not self.tenant_id or not self.tenant_id.strip():
            raise ValidationError("Tenant ID cannot be empty")
        self.week_start_day = WeekStartDay.parse(self.week_start_day)
        self.daily_preferences = _parse_daily_preferences(self.daily_preferences)

    @classmethod
    def create(
        cls,
        tenant_id: str,
        week_start_day: Union[WeekStartDay, str] = WeekStartDay.MONDAY,
    ) -> "UserSettings":
        """Create default settings: no preference on any day.

        Args:
            tenant_id: Owning tenant
            week_start_day: Weekday planned weeks start on

        Returns:
            UserSettings: New settings with generated id
        """
        return cls(
            id=str(uuid4()),
            tenant_id=tenant_id,
            week_start_day=week_start_day,
            daily_preferences=[DailyPreference(day=day) for day in DayOfWeek],
        )

    def update_week_start_day(self, week_start_day: Union[WeekStartDay, str]) -> None:
        """
        Change the week start day.

        Raises:
            ValidationError: If value is not a supported week start day
        """
        self.week_start_day = WeekStartDay.parse(week_start_day)
        self.updated_at = datetime.now(timezone.utc)

    def update_daily_preferences(self, entries: Iterable[DailyPreferenceInput]) -> None:
        """
        Replace all daily preferences.

        Raises:
            ValidationError: If entries are not exactly one per weekday
                (settings left unchanged)
        """
        self.daily_preferences = _parse_daily_preferences(entries)
        self.updated_at = datetime.now(timezone.utc)

    def preference_for(self, day: DayOfWeek) -> Optional[DailyPreference]:
        """Preference entry of a weekday."""
        return next((entry for entry in self.daily_preferences if entry.day == day), None)


def _parse_daily_preferences(entries: Iterable[DailyPreferenceInput]) -> list[DailyPreference]:
    try:
        parsed = [
            entry if isinstance(entry, DailyPreference) else DailyPreference.model_validate(entry)
            for entry in entries
        ]
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid daily preferences: {e.errors()[0]['msg']}") from e

    if len(parsed) != len(DayOfWeek):
        raise ValidationError(
            "Daily preferences must contain exactly 7 entries (one for each day)"
        )

    days = [entry.day for entry in parsed]
    if len(set(days)) != len(days):
        raise ValidationError("Daily preferences cannot contain duplicate days")

    return parsed
