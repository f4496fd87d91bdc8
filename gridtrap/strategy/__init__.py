"""
Grid strategies: synthesize the initial positions of a grid.
"""

from .base import Strategy
from .grid import Grid
from .grid_percent import GridPercent

__all__ = ["Strategy", "Grid", "GridPercent"]
