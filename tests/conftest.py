"""
Pytest configuration and fixtures for gridtrap tests.
"""
import asyncio
from decimal import Decimal
from typing import List

import pytest
from hypothesis import strategies as st

from gridtrap.errors import TraderFailure
from gridtrap.range import Range
from gridtrap.trade.models import Trade
from gridtrap.trade.position import Position
from gridtrap.trade.trader import PaperTrader


def dec(value) -> Decimal:
    return Decimal(str(value))


# ============================================================================
# HYPOTHESIS STRATEGIES
# ============================================================================

@st.composite
def price_strategy(draw, min_value=1, max_value=100000, places=4):
    """Generate positive Decimal prices."""
    return draw(st.decimals(min_value=min_value, max_value=max_value, places=places))


@st.composite
def range_strategy(draw):
    """Generate a Range whose endpoints may come in either order."""
    return Range(draw(price_strategy()), draw(price_strategy()))


# ============================================================================
# TEST TRADERS
# ============================================================================

class FailingBuyTrader(PaperTrader):
    """Sells normally, rejects every buy."""

    async def buy(self, price, quote_quantity) -> List[Trade]:
        raise TraderFailure("buy rejected by venue")


class SplittingTrader(PaperTrader):
    """Fills every request in two equal halves."""

    async def buy(self, price, quote_quantity) -> List[Trade]:
        half = quote_quantity / 2
        first = await super().buy(price, half)
        second = await super().buy(price, quote_quantity - half)
        return first + second

    async def sell(self, price, base_quantity) -> List[Trade]:
        half = base_quantity / 2
        first = await super().sell(price, half)
        second = await super().sell(price, base_quantity - half)
        return first + second


class SlowTrader(PaperTrader):
    """Yields to the event loop before every fill."""

    async def buy(self, price, quote_quantity) -> List[Trade]:
        await asyncio.sleep(0.01)
        return await super().buy(price, quote_quantity)

    async def sell(self, price, base_quantity) -> List[Trade]:
        await asyncio.sleep(0.01)
        return await super().sell(price, base_quantity)


# ============================================================================
# FIXTURES
# ============================================================================

@pytest.fixture
def trader():
    """Paper trader without commission."""
    return PaperTrader()


@pytest.fixture
def trader_with_commission():
    """Paper trader charging 0.1% per fill."""
    return PaperTrader(commission=dec("0.001"))


@pytest.fixture
def short_position():
    """Position holding only quote, buy band [30, 50], sell band [200, 250]."""
    return Position(
        buying_prices=[Range(dec("30"), dec("50"))],
        selling_prices=[Range(dec("200"), dec("250"))],
        base_quantity=dec("0.0"),
        quote_quantity=dec("20.0"),
    )


@pytest.fixture
def holding_position():
    """Position holding base and quote, buy band [30, 80], sell band [210, 250]."""
    return Position(
        buying_prices=[Range(dec("30"), dec("80"))],
        selling_prices=[Range(dec("210"), dec("250"))],
        base_quantity=dec("5.0"),
        quote_quantity=dec("20.0"),
    )
