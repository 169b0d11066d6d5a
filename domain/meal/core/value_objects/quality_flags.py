"""QualityFlags value object - boolean taste/preparation attributes of a meal."""

from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Mapping

from domain.shared.errors import ValidationError

QUALITY_FLAG_KEYS: tuple[str, ...] = (
    "is_dinner",
    "is_lunch",
    "is_creamy",
    "is_acidic",
    "green_veg",
    "makes_lunch",
    "is_easy_to_make",
    "needs_prep",
)

# Flags a tenant can require per weekday (slot flags and makes_lunch excluded)
DAILY_PREFERENCE_KEYS: tuple[str, ...] = (
    "is_creamy",
    "is_acidic",
    "green_veg",
    "is_easy_to_make",
    "needs_prep",
)


@dataclass(frozen=True)
class QualityFlags:
    """Immutable set of boolean meal attributes.

    Invariant: a meal cannot be both creamy and acidic. The check runs on
    every construction, so ``create``, ``update`` and ``from_dict`` all
    enforce it.

    Attributes:
        is_dinner: Suitable for the dinner slot (default True)
        is_lunch: Suitable for the lunch slot
        is_creamy: Creamy dish
        is_acidic: Acidic dish
        green_veg: Contains green vegetables
        makes_lunch: Dinner leaves enough for the next day's lunch
        is_easy_to_make: Quick to cook
        needs_prep: Requires advance preparation
    """

    is_dinner: bool = True
    is_lunch: bool = False
    is_creamy: bool = False
    is_acidic: bool = False
    green_veg: bool = False
    makes_lunch: bool = False
    is_easy_to_make: bool = False
    needs_prep: bool = False

    def __post_init__(self) -> None:
        """Validate flag types and creamy/acidic exclusivity.

        Raises:
            ValidationError: If a flag is not a bool or both is_creamy
                and is_acidic are set
        """
        for f in fields(self):
            if not isinstance(getattr(self, f.name), bool):
                raise ValidationError(f"Quality flag '{f.name}' must be a boolean")
        if self.is_creamy and self.is_acidic:
            raise ValidationError("is_creamy and is_acidic cannot both be true")

    @classmethod
    def create(cls, **partial: bool) -> "QualityFlags":
        """Create flags from a partial mapping, filling defaults.

        Raises:
            ValidationError: On unknown keys or invariant violation

        Example:
            >>> QualityFlags.create(is_creamy=True).is_dinner
            True
        """
        _reject_unknown_keys(partial)
        return cls(**partial)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "QualityFlags":
        """Rehydrate flags from a stored mapping (missing keys use defaults)."""
        return cls.create(**{key: data[key] for key in QUALITY_FLAG_KEYS if key in data})

    def update(self, **changes: bool) -> "QualityFlags":
        """Return new flags with changes merged over the current ones.

        Raises:
            ValidationError: On unknown keys or invariant violation
        """
        _reject_unknown_keys(changes)
        return replace(self, **changes)

    def to_dict(self) -> dict[str, bool]:
        """Plain mapping of all eight flags."""
        return asdict(self)


def _reject_unknown_keys(values: Mapping[str, Any]) -> None:
    unknown = sorted(set(values) - set(QUALITY_FLAG_KEYS))
    if unknown:
        raise ValidationError(f"Unknown quality flags: {', '.join(unknown)}")
