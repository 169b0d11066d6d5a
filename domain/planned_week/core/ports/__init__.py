"""Planned week domain ports."""

from .repository import IPlannedWeekRepository

__all__ = ["IPlannedWeekRepository"]
