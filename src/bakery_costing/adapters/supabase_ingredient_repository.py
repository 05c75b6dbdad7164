"""Supabase implementation for ingredients."""

from dataclasses import dataclass

from supabase import Client

from bakery_costing.adapters.supabase_errors import execute, to_float
from bakery_costing.domain.ingredients import Ingredient
from bakery_costing.domain.units import parse_unit
from bakery_costing.errors import PersistenceError
from bakery_costing.services.catalog import IngredientRepository

TABLE = "ingredients"


@dataclass
class SupabaseIngredientRepository(IngredientRepository):
    """Supabase-backed ingredient repository."""

    client: Client

    def list_by_owner(self, owner_id: str) -> list[Ingredient]:
        """Return all ingredients of an owner."""
        rows = execute(
            self.client.table(TABLE).select("*").eq("user_id", owner_id).order("name")
        )
        return [_parse_ingredient(row) for row in rows]

    def create(self, owner_id: str, payload: dict[str, object]) -> Ingredient:
        """Create an ingredient row and return it."""
        rows = execute(
            self.client.table(TABLE).insert({"user_id": owner_id, **payload})
        )
        if not rows:
            raise PersistenceError("Failed to create ingredient")
        return _parse_ingredient(rows[0])

    def update(self, ingredient_id: str, payload: dict[str, object]) -> Ingredient:
        """Update an ingredient row and return it."""
        rows = execute(
            self.client.table(TABLE).update(payload).eq("id", ingredient_id)
        )
        if not rows:
            raise PersistenceError("Failed to update ingredient")
        return _parse_ingredient(rows[0])

    def delete(self, ingredient_id: str) -> None:
        """Delete an ingredient row."""
        execute(self.client.table(TABLE).delete().eq("id", ingredient_id))


def _parse_ingredient(row: dict[str, object]) -> Ingredient:
    return Ingredient(
        id=str(row["id"]),
        owner_id=str(row.get("user_id", "")),
        name=str(row.get("name") or ""),
        unit=parse_unit(row.get("unit")),
        price_per_unit=to_float(row.get("price_per_unit")),
    )
