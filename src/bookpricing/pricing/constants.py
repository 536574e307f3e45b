"""Pricing constants shared by both variants."""
from decimal import Decimal

PHYSICAL_SURCHARGE = Decimal("15.00")
DIGITAL_SURCHARGE = Decimal("0.0")
STANDARD_TAX_RATE = Decimal("1.10")
