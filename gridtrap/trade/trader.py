"""
Trader capability: the seam between the trading core and whatever places orders.

Anything with async buy/sell returning a list of Trades satisfies it, so a paper
simulator and a live venue client are interchangeable.
"""

from decimal import Decimal
from typing import List, Protocol, runtime_checkable

from loguru import logger

from ..errors import InvalidPrice, InvalidQuantity, TraderFailure
from ..types import BaseQuantity, ONE, Price, QuoteQuantity, ZERO, to_decimal
from .models import Trade


@runtime_checkable
class Trader(Protocol):
    async def buy(self, price: Price, quote_quantity: QuoteQuantity) -> List[Trade]:
        """Spend quote_quantity at or near price. May return several partial fills."""
        ...

    async def sell(self, price: Price, base_quantity: BaseQuantity) -> List[Trade]:
        """Sell base_quantity at or near price. May return several partial fills."""
        ...


def validate_order(price: Price, quantity: Decimal) -> None:
    """Reject orders no venue would accept"""
    if not price.is_finite() or price <= ZERO:
        raise InvalidPrice(f"price must be positive and finite, got {price}")
    if quantity < ZERO:
        raise InvalidQuantity(f"quantity must not be negative, got {quantity}")


class PaperTrader:
    """
    Simulated execution: every request fills completely at the requested price.
    The commission is taken out of what the request receives.
    """

    def __init__(self, commission=ZERO):
        self.commission = to_decimal(commission)
        self.history: List[Trade] = []
        self.halted = False

    @classmethod
    def from_settings(cls, settings) -> 'PaperTrader':
        return cls(commission=settings.commission)

    def halt(self) -> None:
        """Reject every order until resume(), like a venue in maintenance"""
        self.halted = True

    def resume(self) -> None:
        self.halted = False

    def _check(self, price: Price, quantity: Decimal) -> None:
        validate_order(price, quantity)
        if self.halted:
            raise TraderFailure("paper venue is halted")

    async def buy(self, price: Price, quote_quantity: QuoteQuantity) -> List[Trade]:
        self._check(price, quote_quantity)
        base_quantity = (quote_quantity / price) * (ONE - self.commission)
        trade = Trade.buy(price, base_quantity, quote_quantity)
        self.history.append(trade)
        logger.debug(f"Paper BUY {base_quantity} @ {price} for {quote_quantity}")
        return [trade]

    async def sell(self, price: Price, base_quantity: BaseQuantity) -> List[Trade]:
        self._check(price, base_quantity)
        quote_quantity = (base_quantity * price) * (ONE - self.commission)
        trade = Trade.sell(price, base_quantity, quote_quantity)
        self.history.append(trade)
        logger.debug(f"Paper SELL {base_quantity} @ {price} for {quote_quantity}")
        return [trade]
