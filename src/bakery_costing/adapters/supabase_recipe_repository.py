"""Supabase implementation for recipes."""

from dataclasses import dataclass

from supabase import Client

from bakery_costing.adapters.supabase_errors import execute, to_float
from bakery_costing.domain.recipes import Recipe, RecipeIngredientUsage
from bakery_costing.errors import PersistenceError
from bakery_costing.services.catalog import RecipeRepository

TABLE = "recipes"


@dataclass
class SupabaseRecipeRepository(RecipeRepository):
    """Supabase-backed recipe repository.

    Ingredient rows are stored as a JSON array on the recipe row.
    """

    client: Client

    def list_by_owner(self, owner_id: str) -> list[Recipe]:
        """Return all recipes of an owner."""
        rows = execute(
            self.client.table(TABLE).select("*").eq("user_id", owner_id).order("name")
        )
        return [_parse_recipe(row) for row in rows]

    def create(self, owner_id: str, payload: dict[str, object]) -> Recipe:
        """Create a recipe row and return it."""
        rows = execute(
            self.client.table(TABLE).insert({"user_id": owner_id, **payload})
        )
        if not rows:
            raise PersistenceError("Failed to create recipe")
        return _parse_recipe(rows[0])

    def update(self, recipe_id: str, payload: dict[str, object]) -> Recipe:
        """Replace a recipe row's fields and return it."""
        rows = execute(self.client.table(TABLE).update(payload).eq("id", recipe_id))
        if not rows:
            raise PersistenceError("Failed to update recipe")
        return _parse_recipe(rows[0])

    def delete(self, recipe_id: str) -> None:
        """Delete a recipe row."""
        execute(self.client.table(TABLE).delete().eq("id", recipe_id))


def _parse_recipe(row: dict[str, object]) -> Recipe:
    raw_items = row.get("ingredients")
    items = raw_items if isinstance(raw_items, list) else []
    return Recipe(
        id=str(row["id"]),
        owner_id=str(row.get("user_id", "")),
        name=str(row.get("name") or ""),
        ingredients=[_parse_usage(item) for item in items if isinstance(item, dict)],
        total_yield_weight=to_float(row.get("total_yield_weight")),
        total_cost=to_float(row.get("total_cost")),
        cost_per_gram=to_float(row.get("cost_per_gram")),
    )


def _parse_usage(item: dict[str, object]) -> RecipeIngredientUsage:
    return RecipeIngredientUsage(
        ingredient_id=str(item.get("ingredient_id") or ""),
        quantity_used=to_float(item.get("quantity_used")),
        calculated_cost=to_float(item.get("calculated_cost")),
    )
