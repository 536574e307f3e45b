"""Domain layer: ValueObject base and the priced item."""
from bookpricing.domain.value_object import ValueObject
from bookpricing.domain.item import PricedItem, to_money

__all__ = [
    "ValueObject",
    "PricedItem",
    "to_money",
]
