"""Conversion of domain objects to JSON-ready dicts."""

from bakery_costing.domain.ingredients import Ingredient
from bakery_costing.domain.pricing import SaleQuote
from bakery_costing.domain.recipes import Recipe, RecipeIngredientUsage
from bakery_costing.domain.units import Unit
from bakery_costing.services.recipes import RecipePreview


def ingredient_to_dict(ingredient: Ingredient) -> dict[str, object]:
    unit = ingredient.unit
    return {
        "id": ingredient.id,
        "name": ingredient.name,
        "unit": unit.value if isinstance(unit, Unit) else unit,
        "price_per_unit": ingredient.price_per_unit,
    }


def usage_to_dict(usage: RecipeIngredientUsage) -> dict[str, object]:
    return {
        "ingredient_id": usage.ingredient_id,
        "quantity_used": usage.quantity_used,
        "calculated_cost": usage.calculated_cost,
    }


def recipe_to_dict(recipe: Recipe) -> dict[str, object]:
    return {
        "id": recipe.id,
        "name": recipe.name,
        "ingredients": [usage_to_dict(usage) for usage in recipe.ingredients],
        "ingredient_count": recipe.ingredient_count,
        "total_yield_weight": recipe.total_yield_weight,
        "total_cost": recipe.total_cost,
        "cost_per_gram": recipe.cost_per_gram,
    }


def preview_to_dict(preview: RecipePreview) -> dict[str, object]:
    return {
        "total_cost": preview.total_cost,
        "cost_per_unit": preview.cost_per_unit,
        "rows": [
            {**usage_to_dict(row), "unit_label": label}
            for row, label in zip(preview.rows, preview.unit_labels, strict=True)
        ],
    }


def quote_to_dict(quote: SaleQuote) -> dict[str, object]:
    return {
        "recipe_id": quote.recipe_id,
        "recipe_name": quote.recipe_name,
        "quantity_sold": quote.quantity_sold,
        "real_cost": quote.price.real_cost,
        "suggested_price": quote.price.suggested_price,
        "profit": quote.price.profit,
        "recipe": {
            "total_yield_weight": quote.total_yield_weight,
            "total_cost": quote.total_cost,
            "cost_per_gram": quote.cost_per_gram,
        },
    }
