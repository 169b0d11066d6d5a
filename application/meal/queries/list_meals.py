"""ListMealsQuery - page through a tenant's meal catalog."""

from dataclasses import dataclass
from typing import Mapping, Optional

from domain.meal.core.entities.meal import Meal
from domain.meal.core.ports.meal_repository import IMealRepository
from domain.meal.core.value_objects.quality_flags import QUALITY_FLAG_KEYS
from domain.shared.errors import InvalidInputError

MAX_PAGE_SIZE = 100


@dataclass(frozen=True)
class ListMealsQuery:
    """Query to list catalog meals ordered by name.

    Attributes:
        tenant_id: Tenant identifier
        name: Case-insensitive name substring
        qualities: Quality flags each required to equal the given boolean
        include_archived: Also list archived meals
        limit: Page size (1-100)
        offset: Items to skip
    """

    tenant_id: str
    name: Optional[str] = None
    qualities: Optional[Mapping[str, bool]] = None
    include_archived: bool = False
    limit: int = 50
    offset: int = 0


@dataclass(frozen=True)
class ListMealsResult:
    """Page of meals.

    Attributes:
        items: Meals on this page
        total: Total matching meals
        limit: Page size used
        offset: Offset used
    """

    items: list[Meal]
    total: int
    limit: int
    offset: int


class ListMealsQueryHandler:
    """Handler for ListMealsQuery."""

    def __init__(self, repository: IMealRepository):
        self._repository = repository

    async def handle(self, query: ListMealsQuery) -> ListMealsResult:
        """
        Handle list query.

        Raises:
            InvalidInputError: On bad pagination values or unknown quality flags
        """
        if not 1 <= query.limit <= MAX_PAGE_SIZE:
            raise InvalidInputError(f"limit must be between 1 and {MAX_PAGE_SIZE}")
        if query.offset < 0:
            raise InvalidInputError("offset must be non-negative")

        qualities = dict(query.qualities or {})
        unknown = sorted(set(qualities) - set(QUALITY_FLAG_KEYS))
        if unknown:
            raise InvalidInputError(f"Unknown quality flags: {', '.join(unknown)}")
        if any(not isinstance(value, bool) for value in qualities.values()):
            raise InvalidInputError("Quality flag filters must be booleans")

        meals, total = await self._repository.find_all(
            query.tenant_id,
            name=query.name or None,
            qualities=qualities,
            include_archived=query.include_archived,
            limit=query.limit,
            offset=query.offset,
        )
        return ListMealsResult(items=meals, total=total, limit=query.limit, offset=query.offset)
