"""CQRS Commands for Meal domain."""

from application.meal.commands.archive_meal import (
    ArchiveMealCommand,
    ArchiveMealHandler,
    RestoreMealCommand,
    RestoreMealHandler,
)
from application.meal.commands.create_meal import CreateMealCommand, CreateMealHandler
from application.meal.commands.update_meal import UpdateMealCommand, UpdateMealHandler

__all__ = [
    "ArchiveMealCommand",
    "ArchiveMealHandler",
    "RestoreMealCommand",
    "RestoreMealHandler",
    "CreateMealCommand",
    "CreateMealHandler",
    "UpdateMealCommand",
    "UpdateMealHandler",
]
