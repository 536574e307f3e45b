"""Pricing errors. Everything raised by bookpricing derives from PricingError."""


class PricingError(Exception):
    """Base error for book pricing."""


class InvalidAmountError(PricingError, ValueError):
    """Amount cannot be read as a decimal number."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Not a valid amount: {value!r}")
        self.value = value


class UnknownRuleError(PricingError, KeyError):
    """No rule registered under the given name."""

    def __init__(self, kind: str, name: str) -> None:
        super().__init__(f"No {kind} rule registered for {name!r}")
        self.kind = kind
        self.name = name

    def __str__(self) -> str:
        return self.args[0]
