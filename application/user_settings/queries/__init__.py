"""CQRS Queries for User Settings domain."""

from application.user_settings.queries.get_user_settings import (
    GetUserSettingsQuery,
    GetUserSettingsQueryHandler,
)

__all__ = ["GetUserSettingsQuery", "GetUserSettingsQueryHandler"]
