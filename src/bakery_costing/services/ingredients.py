"""Ingredient price list management."""

import logging
from dataclasses import dataclass

from bakery_costing.domain.ingredients import Ingredient
from bakery_costing.domain.units import Unit, parse_unit
from bakery_costing.errors import NotFoundError, ValidationError
from bakery_costing.services.catalog import CatalogSource, IngredientRepository
from bakery_costing.services.costing import parse_quantity

logger = logging.getLogger(__name__)


@dataclass
class IngredientService:
    """Application service for adding, editing and deleting ingredients."""

    repository: IngredientRepository
    catalog: CatalogSource

    def list_ingredients(self, owner_id: str) -> list[Ingredient]:
        """Return the owner's ingredients sorted by name."""
        return self.catalog.snapshot(owner_id).ingredients

    def add_ingredient(
        self, owner_id: str, name: object, unit: object, price_per_unit: object
    ) -> Ingredient:
        """Validate and create an ingredient."""
        payload = self._validated_payload(owner_id, name, unit, price_per_unit)
        created = self.repository.create(owner_id, payload)
        logger.info("Created ingredient %s for owner %s", created.id, owner_id)
        self.catalog.refresh(owner_id)
        return created

    def edit_ingredient(
        self,
        owner_id: str,
        ingredient_id: str,
        name: object,
        unit: object,
        price_per_unit: object,
    ) -> Ingredient:
        """Validate and update an ingredient in place."""
        self._require_owned(owner_id, ingredient_id)
        payload = self._validated_payload(
            owner_id, name, unit, price_per_unit, exclude_id=ingredient_id
        )
        updated = self.repository.update(ingredient_id, payload)
        logger.info("Updated ingredient %s for owner %s", ingredient_id, owner_id)
        self.catalog.refresh(owner_id)
        return updated

    def delete_ingredient(self, owner_id: str, ingredient_id: str) -> None:
        """Delete an ingredient even if recipes still reference it."""
        self._require_owned(owner_id, ingredient_id)
        self.repository.delete(ingredient_id)
        logger.info("Deleted ingredient %s for owner %s", ingredient_id, owner_id)
        self.catalog.refresh(owner_id)

    def _require_owned(self, owner_id: str, ingredient_id: str) -> Ingredient:
        ingredient = self.catalog.snapshot(owner_id).find_ingredient(ingredient_id)
        if ingredient is None:
            ingredient = self.catalog.refresh(owner_id).find_ingredient(ingredient_id)
        if ingredient is None:
            raise NotFoundError(f"Ingredient {ingredient_id} not found.")
        return ingredient

    def _validated_payload(
        self,
        owner_id: str,
        name: object,
        unit: object,
        price_per_unit: object,
        exclude_id: str | None = None,
    ) -> dict[str, object]:
        cleaned_name = str(name or "").strip()
        if not cleaned_name:
            raise ValidationError("Ingredient name is required.")
        parsed_unit = parse_unit(unit)
        if not isinstance(parsed_unit, Unit):
            raise ValidationError(f"Unknown unit: {unit!r}.")
        price = parse_quantity(price_per_unit)
        if price is None:
            raise ValidationError("Price must be a number.")
        if price < 0:
            raise ValidationError("Price cannot be negative.")
        existing = self.catalog.snapshot(owner_id).ingredients
        if any(
            item.name.casefold() == cleaned_name.casefold() and item.id != exclude_id
            for item in existing
        ):
            raise ValidationError("An ingredient with that name already exists.")
        return {
            "name": cleaned_name,
            "unit": parsed_unit.value,
            "price_per_unit": price,
        }
