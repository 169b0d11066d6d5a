"""MealAssignment value object - meal placed in a slot."""

from dataclasses import dataclass

from domain.shared.errors import ValidationError


@dataclass(frozen=True)
class MealAssignment:
    """Meal placed in a day plan slot, captured at assignment time.

    ``makes_lunch`` is copied from the caller's decision when the meal is
    assigned and is not refreshed from the meal catalog afterwards. Editing
    the meal's flags later does not change leftover propagation for weeks
    already planned.

    Attributes:
        meal_id: Assigned meal identifier
        makes_lunch: Dinner leaves a lunch for the following day
    """

    meal_id: str
    makes_lunch: bool = False

    def __post_init__(self) -> None:
        if not self.meal_id or not str(self.meal_id).strip():
            raise ValidationError("Meal ID cannot be empty")
        if not isinstance(self.makes_lunch, bool):
            raise ValidationError("makes_lunch must be a boolean")
