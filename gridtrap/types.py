"""
Numeric types shared by the whole package.
Every price and quantity is a base-10 Decimal; precision is cut by truncation.
"""

import time
from decimal import Decimal, ROUND_DOWN, ROUND_HALF_EVEN, localcontext
from typing import Any

Price = Decimal
Quantity = Decimal
BaseQuantity = Quantity
QuoteQuantity = Quantity

ZERO = Decimal("0")
ONE = Decimal("1")
TWO = Decimal("2")
INFINITY = Decimal("Infinity")

# Fractional digits kept by inexact division and multiplication
MAX_SCALE = 28
# Working precision wide enough to hold any MAX_SCALE result exactly
WORKING_PRECISION = 60


def to_decimal(value: Any) -> Decimal:
    """Convert a number or numeric string to Decimal without binary float noise"""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def truncate(value: Decimal, digits: int) -> Decimal:
    """
    Drop fractional digits beyond `digits` without rounding.

    Values that already fit keep their own scale, so 50.5 stays 50.5.
    """
    if not value.is_finite():
        return value
    if value.as_tuple().exponent >= -digits:
        return value
    return value.quantize(Decimal(1).scaleb(-digits), rounding=ROUND_DOWN)


def rescale(value: Decimal, digits: int = MAX_SCALE) -> Decimal:
    """Round half-even to at most `digits` fractional digits; shorter scales are kept"""
    if not value.is_finite() or value.as_tuple().exponent >= -digits:
        return value
    with localcontext() as ctx:
        ctx.prec = WORKING_PRECISION
        return value.quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_EVEN)


def timestamp_ms() -> int:
    """Get current timestamp in milliseconds"""
    return int(time.time() * 1000)
