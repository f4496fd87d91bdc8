"""
Strategy: anything that turns static parameters into an initial list of Positions.
"""

from typing import List, Protocol, runtime_checkable

from ..trade.position import Position


@runtime_checkable
class Strategy(Protocol):
    def assign_positions(self) -> List[Position]:
        ...
