"""Shared Supabase query execution."""

import math
from typing import Any

from supabase import PostgrestAPIError

from bakery_costing.errors import PersistenceError


def execute(query: Any) -> list[dict[str, Any]]:
    """Run a query and return its rows, translating store failures."""
    try:
        response = query.execute()
    except PostgrestAPIError as exc:
        raise PersistenceError(exc.message or str(exc)) from exc
    return list(response.data or [])


def to_float(value: object) -> float:
    """Coerce a stored number, falling back to 0.0 for anything non-finite."""
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, int | float):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value)
        except ValueError:
            return 0.0
    else:
        return 0.0
    if not math.isfinite(number):
        return 0.0
    return number
