"""
gridtrap: grid trading core.

Strategies partition a price range into positions, positions trade through a
Trader capability, and trade histories fold into an Evaluate report.
"""

from .errors import GridTrapError, InvalidPrice, InvalidQuantity, TraderFailure
from .range import Range, is_within_ranges
from .runner import GridRunner
from .strategy import Grid, GridPercent, Strategy
from .trade import Evaluate, PaperTrader, Position, Trade, Trader, TradeSide, attempt_fills
from .types import truncate

__version__ = "0.1.0"

__all__ = [
    "GridTrapError",
    "InvalidPrice",
    "InvalidQuantity",
    "TraderFailure",
    "Range",
    "is_within_ranges",
    "GridRunner",
    "Grid",
    "GridPercent",
    "Strategy",
    "Evaluate",
    "PaperTrader",
    "Position",
    "Trade",
    "Trader",
    "TradeSide",
    "attempt_fills",
    "truncate",
]
