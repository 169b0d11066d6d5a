"""User settings domain ports."""

from .repository import IUserSettingsRepository

__all__ = ["IUserSettingsRepository"]
