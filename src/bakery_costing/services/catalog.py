"""Per-owner snapshots of ingredients and recipes.

Readers take a synchronous snapshot; writers call ``refresh`` after a change,
which reloads from the store and notifies subscribers of that owner.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol

from bakery_costing.domain.ingredients import Ingredient
from bakery_costing.domain.recipes import Recipe
from bakery_costing.services.cache import Cache
from bakery_costing.services.costing import index_ingredients

logger = logging.getLogger(__name__)


class IngredientRepository(Protocol):
    """Persistence interface for ingredients."""

    def list_by_owner(self, owner_id: str) -> list[Ingredient]:
        """Return all ingredients of an owner."""

    def create(self, owner_id: str, payload: dict[str, object]) -> Ingredient:
        """Create an ingredient and return it."""

    def update(self, ingredient_id: str, payload: dict[str, object]) -> Ingredient:
        """Update an ingredient and return it."""

    def delete(self, ingredient_id: str) -> None:
        """Delete an ingredient."""


class RecipeRepository(Protocol):
    """Persistence interface for recipes."""

    def list_by_owner(self, owner_id: str) -> list[Recipe]:
        """Return all recipes of an owner."""

    def create(self, owner_id: str, payload: dict[str, object]) -> Recipe:
        """Create a recipe and return it."""

    def update(self, recipe_id: str, payload: dict[str, object]) -> Recipe:
        """Replace a recipe's fields and return it."""

    def delete(self, recipe_id: str) -> None:
        """Delete a recipe."""


@dataclass(frozen=True)
class CatalogSnapshot:
    """Ingredients and recipes of one owner, each sorted by name."""

    owner_id: str
    ingredients: list[Ingredient]
    recipes: list[Recipe]

    def ingredient_index(self) -> dict[str, Ingredient]:
        return index_ingredients(self.ingredients)

    def find_ingredient(self, ingredient_id: str) -> Ingredient | None:
        return self.ingredient_index().get(ingredient_id)

    def find_recipe(self, recipe_id: str) -> Recipe | None:
        for recipe in self.recipes:
            if recipe.id == recipe_id:
                return recipe
        return None


Listener = Callable[[CatalogSnapshot], None]


@dataclass
class CatalogSource:
    """Loads, caches and publishes owner snapshots."""

    ingredient_repository: IngredientRepository
    recipe_repository: RecipeRepository
    cache: Cache
    ttl_seconds: int = 30
    _listeners: dict[str, list[Listener]] = field(default_factory=dict)

    def snapshot(self, owner_id: str) -> CatalogSnapshot:
        """Return the cached snapshot, loading it when absent or expired."""
        cached = self.cache.get(_cache_key(owner_id))
        if isinstance(cached, CatalogSnapshot):
            return cached
        return self._load(owner_id)

    def refresh(self, owner_id: str) -> CatalogSnapshot:
        """Reload an owner's data and notify subscribers."""
        self.cache.delete(_cache_key(owner_id))
        snapshot = self._load(owner_id)
        for listener in list(self._listeners.get(owner_id, [])):
            try:
                listener(snapshot)
            except Exception:
                logger.exception("Catalog listener failed for owner %s", owner_id)
        return snapshot

    def subscribe(self, owner_id: str, listener: Listener) -> Callable[[], None]:
        """Register a listener for an owner's snapshots; returns an unsubscribe."""
        self._listeners.setdefault(owner_id, []).append(listener)

        def unsubscribe() -> None:
            listeners = self._listeners.get(owner_id, [])
            if listener in listeners:
                listeners.remove(listener)
            if not listeners:
                self._listeners.pop(owner_id, None)

        return unsubscribe

    def _load(self, owner_id: str) -> CatalogSnapshot:
        ingredients = self.ingredient_repository.list_by_owner(owner_id)
        recipes = self.recipe_repository.list_by_owner(owner_id)
        snapshot = CatalogSnapshot(
            owner_id=owner_id,
            ingredients=sorted(ingredients, key=lambda item: item.name.casefold()),
            recipes=sorted(recipes, key=lambda item: item.name.casefold()),
        )
        self.cache.set(_cache_key(owner_id), snapshot, self.ttl_seconds)
        return snapshot


def _cache_key(owner_id: str) -> str:
    return f"catalog:{owner_id}"
