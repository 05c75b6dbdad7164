"""Sale pricing and ticket value objects."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SalePrice:
    """Cost, suggested price and gross margin for a quantity sold."""

    real_cost: float
    suggested_price: float
    profit: float


@dataclass(frozen=True)
class SaleQuote:
    """Sale price for a specific recipe and quantity."""

    recipe_id: str
    recipe_name: str
    quantity_sold: float
    cost_per_gram: float
    total_yield_weight: float
    total_cost: float
    price: SalePrice


@dataclass(frozen=True)
class Ticket:
    """Data handed to a ticket renderer."""

    recipe_name: str
    quantity_sold: float
    unit_label: str
    suggested_price: float
