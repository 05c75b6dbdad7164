"""Domain models for priced ingredients."""

from dataclasses import dataclass

from bakery_costing.domain.units import Unit


@dataclass(frozen=True)
class Ingredient:
    """An ingredient with its purchase unit and price per purchase unit."""

    id: str
    owner_id: str
    name: str
    unit: Unit | str
    price_per_unit: float
