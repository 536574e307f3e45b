"""
Hierarchy variant: one subclass per (format, tax) combination.
Each new axis value multiplies the number of leaf classes, and the tax
step is written once per format branch.
"""
from __future__ import annotations

import logging
from decimal import Decimal

from bookpricing.domain import PricedItem
from bookpricing.pricing.constants import PHYSICAL_SURCHARGE, STANDARD_TAX_RATE

logger = logging.getLogger(__name__)


class InheritanceBook(PricedItem):
    """Base book: final price is the base value."""

    def final_price(self) -> Decimal:
        return self.base_value


class PhysicalBook(InheritanceBook):
    """Adds the fixed shipping/printing surcharge."""

    def final_price(self) -> Decimal:
        return self.base_value + PHYSICAL_SURCHARGE


class DigitalBook(InheritanceBook):
    """No surcharge; base behaviour unchanged."""


class TaxedPhysicalBook(PhysicalBook):
    def final_price(self) -> Decimal:
        price = super().final_price() * STANDARD_TAX_RATE
        logger.debug("%s: taxed physical price %s", self.title, price)
        return price


class TaxedDigitalBook(DigitalBook):
    # Same tax step as TaxedPhysicalBook; the lattice cannot share it.
    def final_price(self) -> Decimal:
        price = super().final_price() * STANDARD_TAX_RATE
        logger.debug("%s: taxed digital price %s", self.title, price)
        return price


# (format name, taxed) -> leaf class
HIERARCHY_CLASSES: dict[tuple[str, bool], type[InheritanceBook]] = {
    ("physical", False): PhysicalBook,
    ("physical", True): TaxedPhysicalBook,
    ("digital", False): DigitalBook,
    ("digital", True): TaxedDigitalBook,
}
