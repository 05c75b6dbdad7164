"""Measurement units and purchase-price conversion."""

from enum import Enum


class Unit(str, Enum):
    """Purchase unit of an ingredient, stored by its short label."""

    KG = "Kg"
    GR = "Gr"
    LT = "Lt"
    UN = "Un"


# Price per purchase unit -> price per usage unit (g, ml or count).
_CONVERSION_FACTORS: dict[str, float] = {
    Unit.KG.value: 1000.0,
    Unit.LT.value: 1000.0,
    Unit.GR.value: 1.0,
    Unit.UN.value: 1.0,
}

_USAGE_LABELS: dict[str, str] = {
    Unit.KG.value: "grams",
    Unit.LT.value: "ml",
}


def parse_unit(raw: object) -> Unit | str:
    """Return the matching Unit, or the raw value as text when unrecognized."""
    if isinstance(raw, Unit):
        return raw
    text = str(raw or "")
    try:
        return Unit(text)
    except ValueError:
        return text


def conversion_factor(unit: Unit | str | None) -> float:
    """Return the divisor that turns a purchase price into a usage-unit price.

    Unrecognized units return 1 so malformed stored data still costs.
    """
    key = unit.value if isinstance(unit, Unit) else str(unit or "")
    return _CONVERSION_FACTORS.get(key, 1.0)


def usage_unit_label(unit: Unit | str | None) -> str:
    """Return the label for quantities entered against this unit."""
    if unit is None:
        return "qty"
    key = unit.value if isinstance(unit, Unit) else str(unit)
    return _USAGE_LABELS.get(key, "units")
