"""
Evaluate: aggregate statistics folded from a trade history.
"""

from dataclasses import dataclass
from decimal import Decimal, localcontext
from typing import Any, Dict, Iterable

from ..types import INFINITY, WORKING_PRECISION, ZERO, to_decimal
from .models import Trade


@dataclass
class Evaluate:
    """
    Summary of a trade history.

    leave_base / leave_quote are the net signed inventory change, so they can be
    checked against the live quantities of the positions that produced the trades.
    min_price starts at +Infinity, meaning no trade has been observed yet.
    """
    volume_base: Decimal = ZERO
    volume_quote: Decimal = ZERO
    leave_base: Decimal = ZERO
    leave_quote: Decimal = ZERO
    buy_count: int = 0
    sell_count: int = 0
    max_price: Decimal = ZERO
    min_price: Decimal = INFINITY
    costs: Decimal = ZERO

    @classmethod
    def from_trades(cls, trades: Iterable[Trade]) -> 'Evaluate':
        report = cls()
        for trade in trades:
            report.add(trade)
        return report

    def add(self, trade: Trade) -> None:
        """Fold one trade into the report; sums are exact"""
        if trade.price > self.max_price:
            self.max_price = trade.price
        if trade.price < self.min_price:
            self.min_price = trade.price

        with localcontext() as ctx:
            ctx.prec = WORKING_PRECISION
            self.costs += trade.costs()
            self.volume_base += abs(trade.base_quantity)
            self.volume_quote += abs(trade.quote_quantity)

            if trade.is_buy:
                self.buy_count += 1
                self.leave_base += trade.base_quantity
                self.leave_quote -= trade.quote_quantity
            else:
                self.sell_count += 1
                self.leave_base -= trade.base_quantity
                self.leave_quote += trade.quote_quantity

    @property
    def trade_count(self) -> int:
        return self.buy_count + self.sell_count

    def to_dict(self) -> Dict[str, Any]:
        return {
            "volume_base": str(self.volume_base),
            "volume_quote": str(self.volume_quote),
            "leave_base": str(self.leave_base),
            "leave_quote": str(self.leave_quote),
            "buy_count": self.buy_count,
            "sell_count": self.sell_count,
            "max_price": str(self.max_price),
            "min_price": str(self.min_price),
            "costs": str(self.costs),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Evaluate':
        return cls(
            volume_base=to_decimal(data["volume_base"]),
            volume_quote=to_decimal(data["volume_quote"]),
            leave_base=to_decimal(data["leave_base"]),
            leave_quote=to_decimal(data["leave_quote"]),
            buy_count=int(data["buy_count"]),
            sell_count=int(data["sell_count"]),
            max_price=to_decimal(data["max_price"]),
            min_price=to_decimal(data["min_price"]),
            costs=to_decimal(data["costs"]),
        )
