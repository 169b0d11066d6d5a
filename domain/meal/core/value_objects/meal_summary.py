"""MealSummary read model - catalog query result row."""

from pydantic import BaseModel, ConfigDict, Field


class MealSummary(BaseModel):
    """
    Lightweight view of a catalog meal.

    Returned by meal catalog quality queries. Carries the meal's flags as
    they are at query time.

    Example:
        >>> summary = MealSummary(
        ...     id="meal-1",
        ...     meal_name="Risotto",
        ...     qualities={"is_dinner": True, "is_creamy": True},
        ... )
        >>> summary.qualities["is_creamy"]
        True
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Meal identifier")
    meal_name: str = Field(..., min_length=1, description="Display name")
    qualities: dict[str, bool] = Field(default_factory=dict)
