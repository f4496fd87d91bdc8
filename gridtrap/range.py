"""
Range: a two-point price interval.
Endpoints are stored in the order given; min()/max() resolve them on demand.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, List

from .types import to_decimal


@dataclass(frozen=True)
class Range:
    """Interval between two prices, in either order"""
    a: Decimal
    b: Decimal

    def min(self) -> Decimal:
        return self.a if self.a < self.b else self.b

    def max(self) -> Decimal:
        return self.b if self.a < self.b else self.a

    def contains(self, value: Decimal) -> bool:
        """Inclusive on both ends: a tick exactly on a band edge triggers it"""
        return self.min() <= value <= self.max()

    def to_list(self) -> List[str]:
        """Encode as a two-element list of decimal strings"""
        return [str(self.a), str(self.b)]

    @classmethod
    def from_list(cls, data) -> 'Range':
        a, b = data
        return cls(to_decimal(a), to_decimal(b))


def is_within_ranges(value: Decimal, ranges: Iterable[Range]) -> bool:
    """True if any band contains the value; an empty collection contains nothing"""
    return any(band.contains(value) for band in ranges)
