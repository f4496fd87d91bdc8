"""
Grid runner: drives a set of positions with a stream of market prices.
"""

from decimal import Decimal
from typing import Any, AsyncIterable, Dict, Iterable, List, Optional, Tuple, Union

from loguru import logger

from .strategy.base import Strategy
from .trade.evaluate import Evaluate
from .trade.models import Trade
from .trade.position import Position, attempt_fills
from .trade.trader import Trader
from .types import ZERO, to_decimal
from .utils.state_persistence import StatePersistence


class GridRunner:
    """
    Owns the positions of one grid, the Trader that fills them and the trade history.

    Positions are driven one at a time for each price; exhausted positions are kept.
    """

    def __init__(self, positions: List[Position], trader: Trader, history: Optional[List[Trade]] = None):
        self.positions = positions
        self.trader = trader
        self.history: List[Trade] = list(history) if history else []
        self.ticks = 0

        # Starting inventory, before any trade in history
        base, quote = self.holdings()
        leave_base, leave_quote = Trade.profit(self.history)
        self.initial_base = base - leave_base
        self.initial_quote = quote - leave_quote

        logger.info(f"GridRunner initialized with {len(positions)} positions, "
                    f"{self.initial_quote} quote allocated")

    @classmethod
    def from_strategy(cls, strategy: Strategy, trader: Trader) -> 'GridRunner':
        return cls(strategy.assign_positions(), trader)

    async def on_price(self, price) -> List[Trade]:
        """Process one observed market price"""
        price = to_decimal(price)
        self.ticks += 1

        trades = await attempt_fills(self.positions, self.trader, price)
        self.history.extend(trades)

        for trade in trades:
            logger.info(f"Filled {trade.side.value} {trade.base_quantity} @ {trade.price} "
                        f"({trade.quote_quantity} quote)")
        return trades

    async def run(self, prices: Union[Iterable, AsyncIterable]) -> Evaluate:
        """Replay a price stream, sync or async, and return the resulting evaluation"""
        if hasattr(prices, "__aiter__"):
            async for price in prices:
                await self.on_price(price)
        else:
            for price in prices:
                await self.on_price(price)

        report = self.evaluate()
        logger.info(f"Run finished after {self.ticks} ticks: {report.buy_count} buys, "
                    f"{report.sell_count} sells, net quote {report.leave_quote}")
        return report

    def evaluate(self) -> Evaluate:
        return Evaluate.from_trades(self.history)

    def holdings(self) -> Tuple[Decimal, Decimal]:
        """Total (base, quote) held across all positions"""
        base = sum((p.base_quantity for p in self.positions), ZERO)
        quote = sum((p.quote_quantity for p in self.positions), ZERO)
        return base, quote

    def get_state(self) -> dict:
        """Get current state for logging/debugging"""
        base, quote = self.holdings()
        return {
            "positions": len(self.positions),
            "short_positions": sum(1 for p in self.positions if p.is_short()),
            "trades": len(self.history),
            "ticks": self.ticks,
            "base_quantity": str(base),
            "quote_quantity": str(quote),
        }

    def to_dict(self) -> Dict[str, Any]:
        """Convert positions and history to dictionary for persistence"""
        return {
            "positions": [p.to_dict() for p in self.positions],
            "history": [t.to_dict() for t in self.history],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], trader: Trader) -> 'GridRunner':
        return cls(
            positions=[Position.from_dict(p) for p in data.get("positions", [])],
            trader=trader,
            history=[Trade.from_dict(t) for t in data.get("history", [])],
        )

    def save(self, persistence: StatePersistence, name: str) -> bool:
        return persistence.save_state(name, self.to_dict())

    @classmethod
    def load(cls, persistence: StatePersistence, name: str, trader: Trader) -> Optional['GridRunner']:
        """Restore a saved runner, or None when nothing was saved under `name`"""
        state = persistence.load_state(name)
        if state is None:
            return None
        return cls.from_dict(state, trader)
