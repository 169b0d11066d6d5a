"""Repository Factory for Persistence Layer.

Environment-based repository selection.
Strategy:
- .env (runtime): REPOSITORY_BACKEND=mongodb (persistent storage)
- .env.test (pytest): REPOSITORY_BACKEND=inmemory (fast, isolated tests)
- Default: inmemory

Usage:
    from infrastructure.persistence.factory import (
        create_planned_week_repository,
        get_planned_week_repository,
    )

    repo = create_planned_week_repository()  # inmemory or mongodb based on env
    repo = get_planned_week_repository()     # Singleton instance
"""

from typing import Optional

from domain.meal.core.ports.meal_repository import IMealRepository
from domain.planned_week.core.ports.repository import IPlannedWeekRepository
from domain.user_settings.core.ports.repository import IUserSettingsRepository
from infrastructure.config import (
    INMEMORY_BACKEND,
    MONGODB_BACKEND,
    get_mongodb_uri,
    get_repository_backend,
)
from infrastructure.persistence.in_memory.meal_repository import InMemoryMealRepository
from infrastructure.persistence.in_memory.planned_week_repository import (
    InMemoryPlannedWeekRepository,
)
from infrastructure.persistence.in_memory.user_settings_repository import (
    InMemoryUserSettingsRepository,
)


def _use_mongodb() -> bool:
    """
    Resolve REPOSITORY_BACKEND.

    Raises:
        ValueError: If mongodb is selected without MONGODB_URI, or the
            backend name is unknown
    """
    backend = get_repository_backend()

    if backend == MONGODB_BACKEND:
        if not get_mongodb_uri():
            raise ValueError(
                "REPOSITORY_BACKEND=mongodb but MONGODB_URI not set. "
                "Set MONGODB_URI in .env or use REPOSITORY_BACKEND=inmemory"
            )
        return True

    if backend != INMEMORY_BACKEND:
        raise ValueError(
            f"Unknown REPOSITORY_BACKEND '{backend}'. "
            f"Use '{INMEMORY_BACKEND}' or '{MONGODB_BACKEND}'"
        )
    return False


def create_planned_week_repository() -> IPlannedWeekRepository:
    """Create planned week repository based on REPOSITORY_BACKEND env var.

    Environment variable: REPOSITORY_BACKEND
    Values:
        - "inmemory": In-memory repository (default)
        - "mongodb": MongoDB repository (requires MONGODB_URI)

    Raises:
        ValueError: If mongodb selected but MONGODB_URI not set
    """
    if _use_mongodb():
        from infrastructure.persistence.mongodb.planned_week_repository import (
            MongoPlannedWeekRepository,
        )

        return MongoPlannedWeekRepository()
    return InMemoryPlannedWeekRepository()


def create_meal_repository() -> IMealRepository:
    """Create meal repository based on REPOSITORY_BACKEND env var."""
    if _use_mongodb():
        from infrastructure.persistence.mongodb.meal_repository import MongoMealRepository

        return MongoMealRepository()
    return InMemoryMealRepository()


def create_user_settings_repository() -> IUserSettingsRepository:
    """Create user settings repository based on REPOSITORY_BACKEND env var."""
    if _use_mongodb():
        from infrastructure.persistence.mongodb.user_settings_repository import (
            MongoUserSettingsRepository,
        )

        return MongoUserSettingsRepository()
    return InMemoryUserSettingsRepository()


# Singleton instances (lazy initialization)
_planned_week_repository: Optional[IPlannedWeekRepository] = None
_meal_repository: Optional[IMealRepository] = None
_user_settings_repository: Optional[IUserSettingsRepository] = None


def get_planned_week_repository() -> IPlannedWeekRepository:
    """Get singleton planned week repository instance."""
    global _planned_week_repository
    if _planned_week_repository is None:
        _planned_week_repository = create_planned_week_repository()
    return _planned_week_repository


def get_meal_repository() -> IMealRepository:
    """Get singleton meal repository instance."""
    global _meal_repository
    if _meal_repository is None:
        _meal_repository = create_meal_repository()
    return _meal_repository


def get_user_settings_repository() -> IUserSettingsRepository:
    """Get singleton user settings repository instance."""
    global _user_settings_repository
    if _user_settings_repository is None:
        _user_settings_repository = create_user_settings_repository()
    return _user_settings_repository


def reset_repositories() -> None:
    """Reset singleton repository instances.

    Useful for testing to force re-creation with different env vars.

    Example:
        reset_repositories()
        os.environ["REPOSITORY_BACKEND"] = "inmemory"
        repo = get_meal_repository()  # Creates new instance
    """
    global _planned_week_repository, _meal_repository, _user_settings_repository
    _planned_week_repository = None
    _meal_repository = None
    _user_settings_repository = None
