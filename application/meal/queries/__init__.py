"""CQRS Queries for Meal domain."""

from application.meal.queries.get_eligible_meals import (
    GetEligibleMealsQuery,
    GetEligibleMealsQueryHandler,
    build_meal_filter,
)
from application.meal.queries.get_meal import GetMealQuery, GetMealQueryHandler
from application.meal.queries.get_random_meal import (
    GetRandomMealQuery,
    GetRandomMealQueryHandler,
)
from application.meal.queries.list_meals import (
    ListMealsQuery,
    ListMealsQueryHandler,
    ListMealsResult,
)

__all__ = [
    "GetEligibleMealsQuery",
    "GetEligibleMealsQueryHandler",
    "build_meal_filter",
    "GetMealQuery",
    "GetMealQueryHandler",
    "GetRandomMealQuery",
    "GetRandomMealQueryHandler",
    "ListMealsQuery",
    "ListMealsQueryHandler",
    "ListMealsResult",
]
