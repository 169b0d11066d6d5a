"""Core value objects for planned week domain."""

from .meal_assignment import MealAssignment

__all__ = ["MealAssignment"]
