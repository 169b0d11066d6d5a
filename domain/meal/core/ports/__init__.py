"""Meal domain ports."""

from .meal_repository import IMealRepository, MealQualitiesFilter

__all__ = ["IMealRepository", "MealQualitiesFilter"]
