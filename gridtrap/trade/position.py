"""
Position: one independently funded trading zone.

A position is "short" while it holds no base asset and "holding" otherwise.
attempt_fill() is driven once per observed price and mutates the inventory in
place; minimal_round_trip() plays a fixed sell/buy/sell plan through a Trader
without touching the position.
"""

import asyncio
from dataclasses import dataclass, field
from typing import Any, Dict, List

from loguru import logger

from ..errors import InvalidPrice
from ..range import Range, is_within_ranges
from ..types import BaseQuantity, INFINITY, Price, QuoteQuantity, ZERO, to_decimal
from .models import Trade
from .trader import Trader


@dataclass
class Position:
    buying_prices: List[Range]
    selling_prices: List[Range]
    base_quantity: BaseQuantity = ZERO
    quote_quantity: QuoteQuantity = ZERO

    # Single writer across the await in attempt_fill
    _lock: asyncio.Lock = field(default_factory=asyncio.Lock, init=False, repr=False, compare=False)

    def is_short(self) -> bool:
        return self.base_quantity.is_zero()

    def max_buying_price(self) -> Price:
        """Highest buy band edge, or 0 when there are no buying bands"""
        max_buy_price = ZERO
        for band in self.buying_prices:
            if band.max() > max_buy_price:
                max_buy_price = band.max()
        return max_buy_price

    def min_selling_price(self) -> Price:
        """Lowest sell band edge, or +Infinity when there are no selling bands"""
        min_sell_price = INFINITY
        for band in self.selling_prices:
            if band.min() < min_sell_price:
                min_sell_price = band.min()
        return min_sell_price

    def is_within_buying_price(self, price: Price) -> bool:
        return is_within_ranges(price, self.buying_prices)

    def is_within_selling_price(self, price: Price) -> bool:
        return is_within_ranges(price, self.selling_prices)

    async def attempt_fill(self, trader: Trader, price: Price) -> List[Trade]:
        """
        React to one observed price: sell first, then buy.

        A Trader error propagates as-is. If the buy leg fails after the sell leg
        filled, the sell leg's mutation stays applied.
        """
        async with self._lock:
            trades: List[Trade] = []

            if self.is_within_selling_price(price) and self.base_quantity > ZERO:
                sold = await self._call(trader.sell, "SELL", price, self.base_quantity)
                for trade in sold:
                    self.base_quantity -= trade.base_quantity
                    self.quote_quantity += trade.quote_quantity
                trades.extend(sold)

            if self.is_within_buying_price(price) and self.quote_quantity > ZERO:
                bought = await self._call(trader.buy, "BUY", price, self.quote_quantity)
                for trade in bought:
                    self.base_quantity += trade.base_quantity
                    self.quote_quantity -= trade.quote_quantity
                trades.extend(bought)

            return trades

    async def minimal_round_trip(self, trader: Trader) -> List[Trade]:
        """
        Cheapest cycle that ends flat in quote while capturing the band spread.

        Buys at the highest buy edge and sells at the lowest sell edge. When holding,
        the current base is sold first and the proceeds join the quote inventory.
        Returns 2 legs when short and 3 when holding; the position is not modified.
        """
        if not self.buying_prices:
            raise InvalidPrice("position has no buying band")
        if not self.selling_prices:
            raise InvalidPrice("position has no selling band")

        buying_price = self.max_buying_price()
        selling_price = self.min_selling_price()
        result: List[Trade] = []

        quote_quantity = self.quote_quantity
        if not self.is_short():
            sold = await self._call(trader.sell, "SELL", selling_price, self.base_quantity)
            quote_quantity += sum((trade.quote_quantity for trade in sold), ZERO)
            result.extend(sold)

        bought = await self._call(trader.buy, "BUY", buying_price, quote_quantity)
        base_quantity = sum((trade.base_quantity for trade in bought), ZERO)
        result.extend(bought)

        sold = await self._call(trader.sell, "SELL", selling_price, base_quantity)
        result.extend(sold)

        return result

    @staticmethod
    async def _call(order, side: str, price: Price, quantity) -> List[Trade]:
        try:
            return await order(price, quantity)
        except Exception as e:
            logger.error(f"{side} {quantity} @ {price} failed: {e}")
            raise

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for persistence"""
        return {
            "buying_prices": [band.to_list() for band in self.buying_prices],
            "selling_prices": [band.to_list() for band in self.selling_prices],
            "base_quantity": str(self.base_quantity),
            "quote_quantity": str(self.quote_quantity),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Position':
        """Create from dictionary"""
        return cls(
            buying_prices=[Range.from_list(band) for band in data["buying_prices"]],
            selling_prices=[Range.from_list(band) for band in data["selling_prices"]],
            base_quantity=to_decimal(data["base_quantity"]),
            quote_quantity=to_decimal(data["quote_quantity"]),
        )


async def attempt_fills(positions: List[Position], trader: Trader, price: Price) -> List[Trade]:
    """Drive every position with one price, one at a time, in list order"""
    trades: List[Trade] = []
    for position in positions:
        trades.extend(await position.attempt_fill(trader, price))
    return trades
