"""
Bookpricing — book pricing by inheritance vs composition.
A book's final price is its base value plus a format surcharge, then taxed.
"""
from bookpricing.domain import PricedItem, to_money
from bookpricing.errors import InvalidAmountError, PricingError, UnknownRuleError
from bookpricing.pricing import (
    ComposedBook,
    DigitalFormat,
    FormatCost,
    NoTax,
    PhysicalFormat,
    StandardTax,
    TaxRule,
    compose,
)

__all__ = [
    "PricedItem",
    "to_money",
    "PricingError",
    "InvalidAmountError",
    "UnknownRuleError",
    "TaxRule",
    "FormatCost",
    "StandardTax",
    "NoTax",
    "PhysicalFormat",
    "DigitalFormat",
    "ComposedBook",
    "compose",
]
