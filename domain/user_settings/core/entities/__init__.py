"""User settings domain entities."""

from .user_settings import UserSettings

__all__ = ["UserSettings"]
