"""
Monetary serialization.

Amounts are stored as fixed-point ``Decimal`` (two places) and leave the
API as JSON numbers. The conversion happens here and only here.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from rest_framework import serializers

CENT = Decimal('0.01')


def decimal_to_number(value: Optional[Decimal]) -> Optional[float]:
    """Convert a stored amount to a native number, rounded to cents."""
    if value is None:
        return None
    return float(Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP))


class AmountField(serializers.DecimalField):
    """Read/write amount field that renders as a JSON number."""

    def __init__(self, **kwargs):
        kwargs.setdefault('max_digits', 10)
        kwargs.setdefault('decimal_places', 2)
        super().__init__(**kwargs)

    def to_representation(self, value):
        return decimal_to_number(value)
