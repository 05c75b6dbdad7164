"""Recipe costing and sale pricing.

Everything here is pure: inputs are plain domain objects, nothing is fetched
or persisted, and nothing raises on malformed data. Rows that cannot be costed
(unknown ingredient, unparseable quantity) contribute zero.
"""

import math
from collections.abc import Iterable, Mapping

from bakery_costing.domain.ingredients import Ingredient
from bakery_costing.domain.pricing import SalePrice
from bakery_costing.domain.recipes import (
    RecipeCost,
    RecipeIngredientUsage,
    UsageInput,
)
from bakery_costing.domain.units import conversion_factor

MARKUP = 3


def parse_quantity(value: object) -> float | None:
    """Parse user-entered numeric input, returning None when it isn't a number."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        parsed = float(value)
    elif isinstance(value, str):
        try:
            parsed = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(parsed):
        return None
    return parsed


def usage_cost(ingredient: Ingredient | None, quantity_used: float) -> float:
    """Return the cost of using a quantity of an ingredient.

    The quantity is in the ingredient's usage unit (g, ml or count).
    """
    if ingredient is None or not math.isfinite(quantity_used):
        return 0.0
    if not math.isfinite(ingredient.price_per_unit):
        return 0.0
    factor = conversion_factor(ingredient.unit)
    return (ingredient.price_per_unit / factor) * quantity_used


def index_ingredients(ingredients: Iterable[Ingredient]) -> dict[str, Ingredient]:
    """Index ingredients by id."""
    return {ingredient.id: ingredient for ingredient in ingredients}


def cost_usages(
    usages: Iterable[UsageInput], ingredients: Mapping[str, Ingredient]
) -> list[RecipeIngredientUsage]:
    """Price each row against the given ingredients.

    Every input row yields an output row, including rows whose ingredient is
    missing or whose quantity could not be parsed.
    """
    costed: list[RecipeIngredientUsage] = []
    for usage in usages:
        quantity = parse_quantity(usage.quantity_used)
        if quantity is None:
            costed.append(RecipeIngredientUsage(usage.ingredient_id, 0.0, 0.0))
            continue
        cost = usage_cost(ingredients.get(usage.ingredient_id), quantity)
        costed.append(RecipeIngredientUsage(usage.ingredient_id, quantity, cost))
    return costed


def cost_recipe(
    usages: Iterable[UsageInput],
    ingredients: Mapping[str, Ingredient],
    yield_weight: float,
) -> RecipeCost:
    """Return total cost and cost per yield unit for a recipe.

    yield_weight must be positive; callers validate it first.
    """
    costed = cost_usages(usages, ingredients)
    total = sum(usage.calculated_cost for usage in costed)
    return RecipeCost(
        total_cost=total,
        cost_per_unit=total / yield_weight,
        usages=costed,
    )


def price_recipe(
    cost_per_unit: float, quantity_sold: float, markup: float = MARKUP
) -> SalePrice:
    """Return real cost, suggested price and profit for a quantity sold."""
    real_cost = cost_per_unit * quantity_sold
    suggested_price = real_cost * markup
    return SalePrice(
        real_cost=real_cost,
        suggested_price=suggested_price,
        profit=suggested_price - real_cost,
    )
