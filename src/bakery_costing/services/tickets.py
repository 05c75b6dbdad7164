"""Printable sale tickets."""

import re
from dataclasses import dataclass
from typing import Protocol

from bakery_costing.domain.pricing import Ticket

_WHITESPACE = re.compile(r"\s+")


class TicketRenderer(Protocol):
    """Turns a ticket into a printable document."""

    def render(self, ticket: Ticket) -> str:
        """Return the printable document."""

    def filename(self, ticket: Ticket) -> str:
        """Return a download filename for the document."""


@dataclass
class PlainTextTicketRenderer(TicketRenderer):
    """Narrow plain-text ticket for receipt printers."""

    business_name: str
    footer: str
    handle: str | None = None
    width: int = 32

    def render(self, ticket: Ticket) -> str:
        """Render a centered text ticket."""
        lines = [
            self.business_name,
            "-" * self.width,
            ticket.recipe_name,
            f"{format_quantity(ticket.quantity_sold)} {ticket.unit_label}",
            "",
            format_price(ticket.suggested_price),
            "",
            self.footer,
        ]
        if self.handle:
            lines.append(self.handle)
        return "\n".join(line.center(self.width).rstrip() for line in lines) + "\n"

    def filename(self, ticket: Ticket) -> str:
        """Return the recipe name with whitespace runs replaced by underscores."""
        stem = _WHITESPACE.sub("_", ticket.recipe_name)
        return f"{stem}_ticket.txt"


def format_quantity(value: float) -> str:
    """Format a quantity without a trailing .0 for whole numbers."""
    number = float(value)
    if number.is_integer():
        return str(int(number))
    return str(number)


def format_price(value: float) -> str:
    """Format a price rounded to whole currency units."""
    return f"${value:,.0f}"
