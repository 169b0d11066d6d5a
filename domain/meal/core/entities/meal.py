"""Meal aggregate root - a tenant's catalog meal."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from domain.shared.errors import ValidationError

from ..value_objects.meal_summary import MealSummary
from ..value_objects.quality_flags import QualityFlags


@dataclass
class Meal:
    """
    Aggregate Root: a meal in a tenant's catalog.

    Planned weeks reference meals by id only. Quality flags may change after
    a meal has been planned; planned weeks keep the ``makes_lunch`` decision
    they captured when the meal was assigned.

    Invariants:
    - Name is non-empty (trimmed)
    - Qualities respect creamy/acidic exclusivity (enforced by QualityFlags)

    Identity: Defined by unique ID (uuid4 string)
    Mutability: Name, qualities and archive state can change
    """

    id: str
    tenant_id: str
    name: str
    qualities: QualityFlags = field(default_factory=QualityFlags)
    archived_at: Optional[datetime] = None

    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        """Validate invariants after initialization."""
        if not self.tenant_id or not self.tenant_id.strip():
            raise ValidationError("Tenant ID cannot be empty")
        self.name = _clean_name(self.name)

    @classmethod
    def create(cls, tenant_id: str, name: str, **qualities: bool) -> "Meal":
        """
        Create a new catalog meal.

        Args:
            tenant_id: Owning tenant
            name: Display name
            **qualities: Partial quality flags (defaults: dinner only)

        Returns:
            Meal: New meal with generated id

        Raises:
            ValidationError: If name is empty or flags are invalid
        """
        return cls(
            id=str(uuid4()),
            tenant_id=tenant_id,
            name=name,
            qualities=QualityFlags.create(**qualities),
        )

    @property
    def is_archived(self) -> bool:
        return self.archived_at is not None

    def rename(self, name: str) -> None:
        self.name = _clean_name(name)
        self._touch()

    def update_qualities(self, **changes: bool) -> None:
        """
        Merge quality flag changes.

        Raises:
            ValidationError: If the merged flags violate an invariant
                (meal left unchanged)
        """
        self.qualities = self.qualities.update(**changes)
        self._touch()

    def archive(self) -> None:
        if self.archived_at is None:
            self.archived_at = datetime.now(timezone.utc)
            self._touch()

    def restore(self) -> None:
        if self.archived_at is not None:
            self.archived_at = None
            self._touch()

    def to_summary(self) -> MealSummary:
        """Read model used by catalog queries."""
        return MealSummary(id=self.id, meal_name=self.name, qualities=self.qualities.to_dict())

    def _touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)


def _clean_name(name: str) -> str:
    cleaned = (name or "").strip()
    if not cleaned:
        raise ValidationError("Meal name cannot be empty")
    return cleaned
