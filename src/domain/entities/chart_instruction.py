"""
Domain entities for the instructions handed to the rendering collaborator.
Zero external dependencies: pure Python dataclasses only.
"""

from dataclasses import dataclass
from typing import Sequence

from src.domain.entities.axis_range import AxisRange

SeriesPoint = tuple[int, float]


def indexed_series(prices: Sequence[float]) -> list[SeriesPoint]:
    """Pair every price with its position: ``[(0, p0), (1, p1), ...]``."""
    return [(index, price) for index, price in enumerate(prices)]


@dataclass(frozen=True)
class CreateChart:
    symbol: str
    name: str
    series: list[SeriesPoint]
    range: AxisRange

    def as_dict(self) -> dict:
        return {
            "symbol": self.symbol,
            "name": self.name,
            "series": [list(point) for point in self.series],
            "range": self.range.as_dict(),
        }


@dataclass(frozen=True)
class UpdateChart:
    symbol: str
    series: list[SeriesPoint]
    range: AxisRange
    rebuild_grid: bool
    latest_price: float

    def as_dict(self) -> dict:
        return {
            "symbol": self.symbol,
            "series": [list(point) for point in self.series],
            "range": self.range.as_dict(),
            "rebuildGrid": self.rebuild_grid,
            "latestPrice": self.latest_price,
        }
