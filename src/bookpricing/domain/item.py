"""Priced item: title and base value, shared by both pricing variants."""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Union

from bookpricing.domain.value_object import ValueObject
from bookpricing.errors import InvalidAmountError

Amount = Union[Decimal, int, float, str]


def to_money(value: Amount) -> Decimal:
    """Convert to Decimal via str, so 1.10 stays 1.10 and not its binary float."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise InvalidAmountError(value)
    try:
        result = Decimal(str(value))
    except InvalidOperation:
        raise InvalidAmountError(value) from None
    if not result.is_finite():
        raise InvalidAmountError(value)
    return result


@dataclass(frozen=True)
class PricedItem(ValueObject):
    """Anything with a title and a pre-surcharge, pre-tax base value."""
    title: str
    base_value: Decimal

    def __post_init__(self) -> None:
        # frozen: bypass __setattr__ to normalise the amount
        object.__setattr__(self, "base_value", to_money(self.base_value))
