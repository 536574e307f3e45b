"""
Console demonstration: price the same books with both designs.
Inheritance needs a declared class per combination; composition pairs any rules.
"""
from __future__ import annotations

import logging
from decimal import Decimal
from typing import Protocol

from bookpricing.pricing import (
    ComposedBook,
    DigitalFormat,
    NoTax,
    PhysicalFormat,
    StandardTax,
    TaxedDigitalBook,
    TaxedPhysicalBook,
)

logger = logging.getLogger(__name__)

BANNER = "=== BOOKSTORE: INHERITANCE VS COMPOSITION ==="
SEPARATOR = "-" * 50
SAMPLE_BASE_VALUE = Decimal("100.00")


class PricedBook(Protocol):
    title: str

    def final_price(self) -> Decimal:
        ...


def inheritance_samples() -> list[PricedBook]:
    return [
        TaxedPhysicalBook("Java Inheritance", SAMPLE_BASE_VALUE),
        TaxedDigitalBook("Ebook Inheritance", SAMPLE_BASE_VALUE),
    ]


def composition_samples() -> list[PricedBook]:
    # Reusable rules, combined freely without new classes.
    taxed = StandardTax()
    exempt = NoTax()
    physical = PhysicalFormat()
    digital = DigitalFormat()
    return [
        ComposedBook("Java Composition", SAMPLE_BASE_VALUE, taxed, physical),
        ComposedBook("Ebook Composition", SAMPLE_BASE_VALUE, taxed, digital),
        # Tax-exempt physical book: no class for this exists in the hierarchy.
        ComposedBook("Textbook", SAMPLE_BASE_VALUE, exempt, physical),
    ]


def format_price(price: Decimal) -> str:
    return f"{price:.2f}"


def book_line(book: PricedBook) -> str:
    return f"Book: {book.title} | Final price: {format_price(book.final_price())}"


def render_report() -> list[str]:
    """Fixed report lines, in print order."""
    lines = [BANNER, "", "1. Inheritance approach (rigid):"]
    lines.extend(book_line(book) for book in inheritance_samples())
    lines.extend(["", SEPARATOR, "", "2. Composition approach (flexible):"])
    lines.extend(book_line(book) for book in composition_samples())
    return lines


def run(echo=print) -> None:
    """Print the report line by line via echo."""
    lines = render_report()
    logger.info("Rendering pricing report (%d lines)", len(lines))
    for line in lines:
        echo(line)
