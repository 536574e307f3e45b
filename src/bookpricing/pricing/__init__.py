"""Pricing variants: class hierarchy and composed rules."""
from bookpricing.pricing.composition import (
    ComposedBook,
    DigitalFormat,
    FormatCost,
    NoTax,
    PhysicalFormat,
    StandardTax,
    TaxRule,
)
from bookpricing.pricing.hierarchy import (
    HIERARCHY_CLASSES,
    DigitalBook,
    InheritanceBook,
    PhysicalBook,
    TaxedDigitalBook,
    TaxedPhysicalBook,
)
from bookpricing.pricing.registry import RuleRegistry, compose, default_registry

__all__ = [
    "TaxRule",
    "FormatCost",
    "StandardTax",
    "NoTax",
    "PhysicalFormat",
    "DigitalFormat",
    "ComposedBook",
    "InheritanceBook",
    "PhysicalBook",
    "DigitalBook",
    "TaxedPhysicalBook",
    "TaxedDigitalBook",
    "HIERARCHY_CLASSES",
    "RuleRegistry",
    "default_registry",
    "compose",
]
