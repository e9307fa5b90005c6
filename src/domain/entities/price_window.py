"""
Domain entity: fixed-capacity rolling window of prices for one symbol.
Zero external dependencies.
"""

from collections import deque
from typing import Iterable

from src.domain.errors import InvalidInput


class PriceWindow:
    """FIFO buffer of the most recent prices.

    Capacity is fixed at seeding time to the length of the initial history.
    Once full, every append evicts the oldest price first, so the window
    length stays at capacity from then on.
    """

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise InvalidInput(f"capacity must be positive, got {capacity}")
        self._prices: deque[float] = deque(maxlen=capacity)

    @classmethod
    def seed(cls, history: Iterable[float]) -> "PriceWindow":
        """Build a window whose capacity equals ``len(history)``.

        Raises:
            InvalidInput: if *history* is empty.
        """
        values = [float(price) for price in history]
        if not values:
            raise InvalidInput("price history must not be empty")
        window = cls(len(values))
        window._prices.extend(values)
        return window

    @property
    def capacity(self) -> int:
        return self._prices.maxlen

    @property
    def latest(self) -> float:
        return self._prices[-1]

    def append(self, price: float) -> None:
        # deque(maxlen=...) drops the leftmost element when full
        self._prices.append(float(price))

    def snapshot(self) -> list[float]:
        """Return the current prices, oldest first."""
        return list(self._prices)

    def __len__(self) -> int:
        return len(self._prices)

    def __repr__(self) -> str:
        return f"PriceWindow(capacity={self.capacity}, prices={self.snapshot()!r})"
