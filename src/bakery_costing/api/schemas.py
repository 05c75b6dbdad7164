"""Pydantic models for API request payloads.

Numeric fields accept raw strings as typed by users; parsing is left to the
services so unparseable input follows the costing rules.
"""

from pydantic import BaseModel, Field

from bakery_costing.domain.recipes import UsageInput


class IngredientPayload(BaseModel):
    """Ingredient create or edit payload."""

    name: str = ""
    unit: str = ""
    price_per_unit: float | str | None = None


class UsagePayload(BaseModel):
    """Ingredient row of a recipe payload."""

    ingredient_id: str = ""
    quantity_used: float | str | None = None

    def to_input(self) -> UsageInput:
        return UsageInput(
            ingredient_id=self.ingredient_id, quantity_used=self.quantity_used
        )


class RecipePayload(BaseModel):
    """Recipe create or replace payload."""

    name: str = ""
    ingredients: list[UsagePayload] = Field(default_factory=list)
    total_yield_weight: float | str | None = None


class RecipePreviewPayload(BaseModel):
    """Rows of a recipe being edited."""

    ingredients: list[UsagePayload] = Field(default_factory=list)
    total_yield_weight: float | str | None = None
