"""Meal application services."""
