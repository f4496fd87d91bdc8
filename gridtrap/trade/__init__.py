"""
Trading core: fills, positions, the Trader capability and evaluation.
"""

from .models import Trade, TradeSide
from .evaluate import Evaluate
from .trader import Trader, PaperTrader, validate_order
from .position import Position, attempt_fills

__all__ = [
    "Trade",
    "TradeSide",
    "Evaluate",
    "Trader",
    "PaperTrader",
    "validate_order",
    "Position",
    "attempt_fills",
]
