"""Sale price calculator."""

import math
from dataclasses import dataclass

from bakery_costing.domain.pricing import SaleQuote, Ticket
from bakery_costing.services.catalog import CatalogSource
from bakery_costing.services.costing import MARKUP, parse_quantity, price_recipe


@dataclass
class CalculatorService:
    """Prices a quantity of a saved recipe using its stored cost per gram."""

    catalog: CatalogSource
    markup: float = MARKUP
    unit_label: str = "g"

    def quote(
        self, owner_id: str, recipe_id: str, quantity_sold: object
    ) -> SaleQuote | None:
        """Return a quote, or None when there is nothing to show.

        Nothing is shown for an unknown recipe or a quantity that is missing,
        non-numeric or not positive.
        """
        quantity = parse_quantity(quantity_sold)
        if quantity is None or quantity <= 0:
            return None
        recipe = self.catalog.snapshot(owner_id).find_recipe(recipe_id)
        if recipe is None:
            return None
        price = price_recipe(recipe.cost_per_gram, quantity, self.markup)
        if not math.isfinite(price.suggested_price):
            return None
        return SaleQuote(
            recipe_id=recipe.id,
            recipe_name=recipe.name,
            quantity_sold=quantity,
            cost_per_gram=recipe.cost_per_gram,
            total_yield_weight=recipe.total_yield_weight,
            total_cost=recipe.total_cost,
            price=price,
        )

    def ticket(
        self, owner_id: str, recipe_id: str, quantity_sold: object
    ) -> Ticket | None:
        """Return the ticket data for a quote, if one is available."""
        quote = self.quote(owner_id, recipe_id, quantity_sold)
        if quote is None:
            return None
        return Ticket(
            recipe_name=quote.recipe_name,
            quantity_sold=quote.quantity_sold,
            unit_label=self.unit_label,
            suggested_price=quote.price.suggested_price,
        )
