"""Domain models for recipes and their costed ingredient rows."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RecipeIngredientUsage:
    """Ingredient row of a saved recipe with its cost frozen at save time."""

    ingredient_id: str
    quantity_used: float
    calculated_cost: float


@dataclass(frozen=True)
class UsageInput:
    """Ingredient row as entered, before parsing and costing."""

    ingredient_id: str
    quantity_used: object


@dataclass(frozen=True)
class Recipe:
    """A saved recipe with derived cost fields."""

    id: str
    owner_id: str
    name: str
    ingredients: list[RecipeIngredientUsage]
    total_yield_weight: float
    total_cost: float
    cost_per_gram: float

    @property
    def ingredient_count(self) -> int:
        return len(self.ingredients)


@dataclass(frozen=True)
class RecipeCost:
    """Result of costing a list of ingredient rows."""

    total_cost: float
    cost_per_unit: float
    usages: list[RecipeIngredientUsage]
