"""
Trade records and their cost model.

Buy:  quote -> base
Sell: base  -> quote
"""

from dataclasses import dataclass, field
from decimal import localcontext
from enum import Enum
from typing import Any, Dict, Iterable, Optional, Tuple

from ..types import (BaseQuantity, Price, QuoteQuantity, WORKING_PRECISION, ZERO, rescale,
                     timestamp_ms, to_decimal)


class TradeSide(Enum):
    BUY = "BUY"
    SELL = "SELL"


@dataclass(frozen=True)
class Trade:
    """An executed fill. Equality ignores the timestamp."""
    side: TradeSide
    price: Price
    base_quantity: BaseQuantity    # Actual transaction base quantity
    quote_quantity: QuoteQuantity  # Actual transaction quote quantity
    timestamp: int = field(default_factory=timestamp_ms, compare=False)

    @classmethod
    def buy(cls, price: Price, base_quantity: BaseQuantity, quote_quantity: QuoteQuantity,
            timestamp: Optional[int] = None) -> 'Trade':
        if timestamp is None:
            timestamp = timestamp_ms()
        return cls(TradeSide.BUY, price, base_quantity, quote_quantity, timestamp)

    @classmethod
    def sell(cls, price: Price, base_quantity: BaseQuantity, quote_quantity: QuoteQuantity,
             timestamp: Optional[int] = None) -> 'Trade':
        if timestamp is None:
            timestamp = timestamp_ms()
        return cls(TradeSide.SELL, price, base_quantity, quote_quantity, timestamp)

    @property
    def is_buy(self) -> bool:
        return self.side is TradeSide.BUY

    def costs(self) -> QuoteQuantity:
        """
        Quote value lost between an ideal conversion at `price` and the recorded quantities.

        A fee applied by the venue shows up here, so it can be recovered after the fact.
        Intermediate results keep at most MAX_SCALE fractional digits.
        """
        with localcontext() as ctx:
            ctx.prec = WORKING_PRECISION
            if self.is_buy:
                origin_base = rescale(self.quote_quantity / self.price)
                if self.base_quantity == origin_base:
                    return ZERO
                return rescale((origin_base - self.base_quantity) * self.price)

            origin_quote = rescale(self.base_quantity * self.price)
            if self.quote_quantity == origin_quote:
                return ZERO
            return rescale(origin_quote - self.quote_quantity)

    @staticmethod
    def profit(trades: Iterable['Trade']) -> Tuple[BaseQuantity, QuoteQuantity]:
        """Net signed change of (base, quote) across a trade history"""
        base_quantity = ZERO
        quote_quantity = ZERO
        for trade in trades:
            if trade.is_buy:
                base_quantity += trade.base_quantity
                quote_quantity -= trade.quote_quantity
            else:
                base_quantity -= trade.base_quantity
                quote_quantity += trade.quote_quantity
        return base_quantity, quote_quantity

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for persistence"""
        return {
            "side": self.side.value,
            "price": str(self.price),
            "base_quantity": str(self.base_quantity),
            "quote_quantity": str(self.quote_quantity),
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Trade':
        """Create from dictionary"""
        return cls(
            side=TradeSide(data["side"]),
            price=to_decimal(data["price"]),
            base_quantity=to_decimal(data["base_quantity"]),
            quote_quantity=to_decimal(data["quote_quantity"]),
            timestamp=int(data["timestamp"]),
        )
