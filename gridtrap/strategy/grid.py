"""
Grid: linear partition of a price range into equally funded positions.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, List

from loguru import logger

from ..range import Range
from ..trade.position import Position
from ..types import ONE, TWO, ZERO, to_decimal, truncate

# Fractional digits kept for the interval and the per-position quote slice
GRID_SCALE = 6


@dataclass(frozen=True)
class Grid:
    """
    Split `range` into copies + 1 equal intervals and fund `copies` positions.

    Position i buys in the lower half of interval i and sells from the middle of
    interval i + 1 up to the top of the range, so each sell threshold sits about
    one interval above its own buy band.
    """
    investment: Decimal
    range: Range
    copies: int

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        if self.copies < 1:
            raise ValueError(f"copies must be at least 1, got {self.copies}")
        if self.investment <= ZERO:
            raise ValueError(f"investment must be positive, got {self.investment}")

    def assign_positions(self) -> List[Position]:
        copies = Decimal(self.copies)
        price_highest = self.range.max()
        price_lowest = self.range.min()

        interval = truncate((price_highest - price_lowest) / (copies + ONE), GRID_SCALE)
        interval_quote_quantity = truncate(self.investment / copies, GRID_SCALE)
        half = interval / TWO

        positions = []
        for i in range(self.copies):
            buying = price_lowest + interval * Decimal(i)
            selling = price_lowest + interval * Decimal(i + 2)
            positions.append(Position(
                buying_prices=[Range(buying, buying + half)],
                selling_prices=[Range(selling - half, price_highest)],
                base_quantity=ZERO,
                quote_quantity=interval_quote_quantity,
            ))

        logger.info(f"Grid assigned {len(positions)} positions over [{price_lowest}, {price_highest}], "
                    f"interval {interval}, {interval_quote_quantity} quote each")
        return positions

    def to_dict(self) -> Dict[str, Any]:
        return {
            "investment": str(self.investment),
            "range": self.range.to_list(),
            "copies": self.copies,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Grid':
        return cls(
            investment=to_decimal(data["investment"]),
            range=Range.from_list(data["range"]),
            copies=int(data["copies"]),
        )
