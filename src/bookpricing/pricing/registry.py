"""Rule registry: look up tax and format rules by name, build composed books from names."""
from __future__ import annotations

import logging
from typing import Callable, Optional

from bookpricing.domain.item import Amount
from bookpricing.errors import UnknownRuleError
from bookpricing.pricing.composition import (
    ComposedBook,
    DigitalFormat,
    FormatCost,
    NoTax,
    PhysicalFormat,
    StandardTax,
    TaxRule,
)

logger = logging.getLogger(__name__)

TAX = "tax"
FORMAT = "format"


class RuleRegistry:
    """
    Register rule factories by (kind, name) and resolve them.
    Factories run once; the rule instance is then shared, since rules are stateless.
    """

    def __init__(self) -> None:
        self._registry: dict[tuple[str, str], Callable[[], object]] = {}
        self._instances: dict[tuple[str, str], object] = {}

    def register(self, kind: str, name: str, factory: Callable[[], object]) -> RuleRegistry:
        """Register a factory under kind ("tax" or "format") and name. Returns self for chaining."""
        key = (kind, name)
        self._registry[key] = factory
        self._instances.pop(key, None)
        return self

    def register_instance(self, kind: str, name: str, rule: object) -> RuleRegistry:
        """Register a ready-made rule."""
        key = (kind, name)
        self._registry[key] = lambda: rule
        self._instances[key] = rule
        return self

    def resolve(self, kind: str, name: str) -> object:
        key = (kind, name)
        if key not in self._registry:
            raise UnknownRuleError(kind, name)
        if key not in self._instances:
            self._instances[key] = self._registry[key]()
        return self._instances[key]

    def tax_rule(self, name: str) -> TaxRule:
        rule = self.resolve(TAX, name)
        if not isinstance(rule, TaxRule):
            raise TypeError(f"{TAX} rule {name!r} has no apply(): {rule!r}")
        return rule

    def format_cost(self, name: str) -> FormatCost:
        rule = self.resolve(FORMAT, name)
        if not isinstance(rule, FormatCost):
            raise TypeError(f"{FORMAT} rule {name!r} has no additional_cost(): {rule!r}")
        return rule

    def names(self, kind: str) -> list[str]:
        return sorted(name for k, name in self._registry if k == kind)


def default_registry() -> RuleRegistry:
    """Registry with the built-in rules: tax "standard"/"exempt", format "physical"/"digital"."""
    return (
        RuleRegistry()
        .register(TAX, "standard", StandardTax)
        .register(TAX, "exempt", NoTax)
        .register(FORMAT, "physical", PhysicalFormat)
        .register(FORMAT, "digital", DigitalFormat)
    )


def compose(
    title: str,
    base_value: Amount,
    tax: str = "standard",
    format: str = "physical",
    registry: Optional[RuleRegistry] = None,
) -> ComposedBook:
    """Build a ComposedBook from rule names, e.g. compose("Textbook", 100, tax="exempt")."""
    registry = registry or default_registry()
    logger.debug("Composing %r with tax=%s format=%s", title, tax, format)
    return ComposedBook(
        title=title,
        base_value=base_value,
        tax_rule=registry.tax_rule(tax),
        format_cost=registry.format_cost(format),
    )
