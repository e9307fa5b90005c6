"""
Domain entity: padded vertical axis range for a price chart.
Zero external dependencies.

The range is a pure function of a price set: 10% below the lowest price and
10% above the highest. Staleness is one-directional, so a cached range only
ever widens and never shrinks back when prices drift toward the center.
"""

import math
from dataclasses import dataclass
from typing import Sequence

from src.domain.errors import InvalidInput

LOWER_PADDING = 0.9
UPPER_PADDING = 1.1


def check_price(price: float) -> float:
    """Return *price* as a float, or raise InvalidInput if it cannot be charted."""
    price = float(price)
    # the padded bound must stay finite for the axis to be drawable
    if not math.isfinite(price * UPPER_PADDING):
        raise InvalidInput(f"price out of chartable range: {price!r}")
    return price


@dataclass(frozen=True)
class AxisRange:
    min: float
    max: float

    @classmethod
    def compute(cls, prices: Sequence[float]) -> "AxisRange":
        """Raises InvalidInput on an empty price set or an unchartable price."""
        if not prices:
            raise InvalidInput("cannot compute an axis range from no prices")
        low = check_price(min(prices))
        high = check_price(max(prices))
        return cls(min=low * LOWER_PADDING, max=high * UPPER_PADDING)

    @classmethod
    def is_stale(cls, current: "AxisRange", prices: Sequence[float]) -> bool:
        """True iff the range computed from *prices* falls outside *current*."""
        candidate = cls.compute(prices)
        return candidate.min < current.min or candidate.max > current.max

    def widen(self, other: "AxisRange") -> "AxisRange":
        """Smallest range covering both *self* and *other*."""
        return AxisRange(min=min(self.min, other.min), max=max(self.max, other.max))

    def as_dict(self) -> dict:
        return {"min": self.min, "max": self.max}
