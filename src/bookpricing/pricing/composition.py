"""
Composition variant: a book holds a tax rule and a format cost rule.
Any tax rule pairs with any format without declaring a new type.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Protocol, runtime_checkable

from bookpricing.domain import PricedItem
from bookpricing.pricing.constants import DIGITAL_SURCHARGE, PHYSICAL_SURCHARGE, STANDARD_TAX_RATE

logger = logging.getLogger(__name__)


@runtime_checkable
class TaxRule(Protocol):
    """Multiplicative adjustment applied after the surcharge."""

    def apply(self, value: Decimal) -> Decimal:
        ...


@runtime_checkable
class FormatCost(Protocol):
    """Additive cost of delivering a given format."""

    def additional_cost(self) -> Decimal:
        ...


class StandardTax:
    def apply(self, value: Decimal) -> Decimal:
        return value * STANDARD_TAX_RATE


class NoTax:
    def apply(self, value: Decimal) -> Decimal:
        return value


class PhysicalFormat:
    def additional_cost(self) -> Decimal:
        return PHYSICAL_SURCHARGE


class DigitalFormat:
    def additional_cost(self) -> Decimal:
        return DIGITAL_SURCHARGE


@dataclass(frozen=True)
class ComposedBook(PricedItem):
    """
    Book priced by delegation: base + format.additional_cost(), then tax_rule.apply().
    Rules are fixed at construction; use with_tax_rule / with_format_cost for a copy.
    """
    tax_rule: TaxRule
    format_cost: FormatCost

    def final_price(self) -> Decimal:
        with_surcharge = self.base_value + self.format_cost.additional_cost()
        price = self.tax_rule.apply(with_surcharge)
        logger.debug(
            "%s: %s + %s surcharge -> %s (%s)",
            self.title,
            self.base_value,
            type(self.format_cost).__name__,
            price,
            type(self.tax_rule).__name__,
        )
        return price

    def with_tax_rule(self, tax_rule: TaxRule) -> ComposedBook:
        return replace(self, tax_rule=tax_rule)

    def with_format_cost(self, format_cost: FormatCost) -> ComposedBook:
        return replace(self, format_cost=format_cost)
