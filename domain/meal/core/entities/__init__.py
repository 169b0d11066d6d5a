"""Meal domain entities."""

from .meal import Meal

__all__ = ["Meal"]
