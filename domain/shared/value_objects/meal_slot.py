"""MealSlot value object - lunch or dinner."""

from enum import Enum
from typing import Union

from ..errors import InvalidInputError


class MealSlot(str, Enum):
    """Slot of a day plan a meal can be assigned to."""

    LUNCH = "lunch"
    DINNER = "dinner"

    @classmethod
    def parse(cls, value: Union["MealSlot", str]) -> "MealSlot":
        """
        Parse a slot name (case-insensitive).

        Raises:
            InvalidInputError: If value is not lunch or dinner
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as e:
            raise InvalidInputError(f"invalid meal slot: {value}") from e
