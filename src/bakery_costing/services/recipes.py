"""Recipe composition and save-time costing."""

import logging
import math
from dataclasses import dataclass

from bakery_costing.domain.recipes import Recipe, RecipeIngredientUsage, UsageInput
from bakery_costing.domain.units import usage_unit_label
from bakery_costing.errors import NotFoundError, ValidationError
from bakery_costing.services.catalog import CatalogSource, RecipeRepository
from bakery_costing.services.costing import cost_recipe, cost_usages, parse_quantity

logger = logging.getLogger(__name__)


@dataclass
class RecipePreview:
    """Running cost of a recipe that is still being edited."""

    total_cost: float
    cost_per_unit: float | None
    rows: list[RecipeIngredientUsage]
    unit_labels: list[str]


@dataclass
class RecipeService:
    """Application service for recipes.

    Costs are computed against the owner's current ingredient prices when a
    recipe is saved and are stored with it. Later price changes do not touch
    saved recipes until they are saved again.
    """

    repository: RecipeRepository
    catalog: CatalogSource

    def list_recipes(self, owner_id: str) -> list[Recipe]:
        """Return the owner's recipes sorted by name."""
        return self.catalog.snapshot(owner_id).recipes

    def get_recipe(self, owner_id: str, recipe_id: str) -> Recipe | None:
        """Return a saved recipe, if the owner has it."""
        return self.catalog.snapshot(owner_id).find_recipe(recipe_id)

    def preview(
        self,
        owner_id: str,
        usages: list[UsageInput],
        total_yield_weight: object = None,
    ) -> RecipePreview:
        """Cost rows without validating or saving them."""
        ingredients = self.catalog.snapshot(owner_id).ingredient_index()
        rows = cost_usages(usages, ingredients)
        total = sum(row.calculated_cost for row in rows)
        yield_weight = parse_quantity(total_yield_weight)
        per_unit = total / yield_weight if yield_weight and yield_weight > 0 else None
        labels = []
        for usage in usages:
            ingredient = ingredients.get(usage.ingredient_id)
            labels.append(usage_unit_label(ingredient.unit if ingredient else None))
        return RecipePreview(
            total_cost=total,
            cost_per_unit=per_unit,
            rows=rows,
            unit_labels=labels,
        )

    def save_recipe(
        self,
        owner_id: str,
        name: object,
        usages: list[UsageInput],
        total_yield_weight: object,
        recipe_id: str | None = None,
    ) -> Recipe:
        """Validate, cost and persist a recipe, creating or replacing it."""
        cleaned_name = str(name or "").strip()
        if not cleaned_name:
            raise ValidationError("Recipe name is required.")
        if not usages:
            raise ValidationError("Add at least one ingredient.")
        yield_weight = parse_quantity(total_yield_weight)
        if yield_weight is None or yield_weight <= 0:
            raise ValidationError("Yield must be a positive number.")
        if recipe_id is not None and self._find_owned(owner_id, recipe_id) is None:
            raise NotFoundError(f"Recipe {recipe_id} not found.")

        ingredients = self.catalog.snapshot(owner_id).ingredient_index()
        missing = [
            usage.ingredient_id
            for usage in usages
            if usage.ingredient_id not in ingredients
        ]
        if missing:
            logger.debug("Recipe rows reference unknown ingredients: %s", missing)
        cost = cost_recipe(usages, ingredients, yield_weight)
        if not math.isfinite(cost.cost_per_unit):
            raise ValidationError("Yield is too small to price this recipe.")
        payload: dict[str, object] = {
            "name": cleaned_name,
            "ingredients": [
                {
                    "ingredient_id": usage.ingredient_id,
                    "quantity_used": usage.quantity_used,
                    "calculated_cost": usage.calculated_cost,
                }
                for usage in cost.usages
            ],
            "total_yield_weight": yield_weight,
            "total_cost": cost.total_cost,
            "cost_per_gram": cost.cost_per_unit,
        }
        if recipe_id is None:
            saved = self.repository.create(owner_id, payload)
            logger.info("Created recipe %s for owner %s", saved.id, owner_id)
        else:
            saved = self.repository.update(recipe_id, payload)
            logger.info("Updated recipe %s for owner %s", recipe_id, owner_id)
        self.catalog.refresh(owner_id)
        return saved

    def delete_recipe(self, owner_id: str, recipe_id: str) -> None:
        """Delete a recipe the owner has."""
        if self._find_owned(owner_id, recipe_id) is None:
            raise NotFoundError(f"Recipe {recipe_id} not found.")
        self.repository.delete(recipe_id)
        logger.info("Deleted recipe %s for owner %s", recipe_id, owner_id)
        self.catalog.refresh(owner_id)

    def _find_owned(self, owner_id: str, recipe_id: str) -> Recipe | None:
        recipe = self.catalog.snapshot(owner_id).find_recipe(recipe_id)
        if recipe is None:
            recipe = self.catalog.refresh(owner_id).find_recipe(recipe_id)
        return recipe
