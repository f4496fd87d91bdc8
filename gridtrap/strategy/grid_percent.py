"""
GridPercent: geometric partition of a price range.

A ladder of rungs grows by `percent` per step from the bottom of the range.
Every non-overlapping window of four rungs yields one position.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, List

from loguru import logger

from ..range import Range
from ..trade.position import Position
from ..types import ONE, ZERO, to_decimal, truncate

# Fractional digits kept for every rung of the ladder
LADDER_SCALE = 12
WINDOW = 4
WINDOW_STEP = 4


@dataclass(frozen=True)
class GridPercent:
    """
    Each position is funded with the full `investment`; it is not split across rungs.

    percent_lost, when strictly between 0 and 1, adds a stop-loss sell band from 0
    up to `percent_lost` below the position's sell rung.
    """
    investment: Decimal
    range: Range
    percent: Decimal
    percent_lost: Decimal = ZERO

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        if self.percent <= ZERO:
            raise ValueError(f"percent must be positive, got {self.percent}")
        if self.investment <= ZERO:
            raise ValueError(f"investment must be positive, got {self.investment}")
        if self.range.min() <= ZERO:
            raise ValueError(f"range must start above zero, got {self.range.min()}")

    def ladder(self) -> List[Decimal]:
        """Rungs from the bottom of the range, stopping before the first one >= top"""
        termination_price = self.range.max()
        increase = ONE + self.percent

        prices = [self.range.min()]
        while True:
            new_price = truncate(prices[-1] * increase, LADDER_SCALE)
            if new_price >= termination_price:
                break
            if new_price <= prices[-1]:
                raise ValueError(f"percent {self.percent} does not move {prices[-1]} at {LADDER_SCALE} digits")
            prices.append(new_price)
        return prices

    def assign_positions(self) -> List[Position]:
        termination_price = self.range.max()
        lost = ONE - self.percent_lost
        with_stop_loss = ZERO < self.percent_lost < ONE
        prices = self.ladder()

        positions = []
        # prices[k + 3] only guards that a full window exists
        for k in range(0, len(prices) - WINDOW + 1, WINDOW_STEP):
            buy_0, buy_1, sell_0 = prices[k], prices[k + 1], prices[k + 2]

            selling_prices = [Range(sell_0, termination_price)]
            if with_stop_loss:
                selling_prices.append(Range(ZERO, sell_0 * lost))

            positions.append(Position(
                buying_prices=[Range(buy_0, buy_1)],
                selling_prices=selling_prices,
                base_quantity=ZERO,
                quote_quantity=self.investment,
            ))

        if not positions:
            logger.warning(f"GridPercent ladder has {len(prices)} rungs, not enough for a position")
        else:
            logger.info(f"GridPercent assigned {len(positions)} positions from {len(prices)} rungs")
        return positions

    def to_dict(self) -> Dict[str, Any]:
        return {
            "investment": str(self.investment),
            "range": self.range.to_list(),
            "percent": str(self.percent),
            "percent_lost": str(self.percent_lost),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'GridPercent':
        return cls(
            investment=to_decimal(data["investment"]),
            range=Range.from_list(data["range"]),
            percent=to_decimal(data["percent"]),
            percent_lost=to_decimal(data.get("percent_lost", "0")),
        )
