"""Meal catalog domain."""
