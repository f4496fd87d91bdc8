"""Exceptions raised by the trading core and by Trader implementations."""


class GridTrapError(Exception):
    """Base class for all gridtrap errors"""


class InvalidPrice(GridTrapError, ValueError):
    """Price is not strictly positive and finite, or no band defines one"""


class InvalidQuantity(GridTrapError, ValueError):
    """Quantity is negative"""


class TraderFailure(GridTrapError):
    """Opaque failure reported by a Trader, e.g. a venue rejecting an order"""
