"""CQRS Commands for User Settings domain."""

from application.user_settings.commands.update_user_settings import (
    UpdateUserSettingsCommand,
    UpdateUserSettingsHandler,
)

__all__ = ["UpdateUserSettingsCommand", "UpdateUserSettingsHandler"]
