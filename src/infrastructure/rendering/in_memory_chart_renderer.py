"""
Infrastructure adapter: headless in-memory renderer -> IChartRenderer.

Keeps the state a flot plot would hold (series plus options) for every
symbol, and counts grid rebuilds and draws. The FastAPI entrypoint serves
these snapshots to browser clients, which do the actual painting.
"""

from typing import Optional

from src.domain.entities.axis_range import AxisRange
from src.domain.entities.chart_instruction import CreateChart, SeriesPoint
from src.domain.ports.chart_renderer_port import IChartHandle, IChartRenderer


def chart_options(axis_range: AxisRange) -> dict:
    return {
        "series": {"shadowSize": 0},
        "yaxis": {"min": axis_range.min, "max": axis_range.max},
        "xaxis": {"show": False},
    }


class InMemoryChartHandle(IChartHandle):
    def __init__(self, symbol: str, name: str) -> None:
        self.symbol = symbol
        self.name = name
        self.series: list[SeriesPoint] = []
        self.axis_range: Optional[AxisRange] = None
        self.grid_builds = 0
        self.draws = 0

    def set_name(self, name: str) -> None:
        self.name = name

    def set_series(self, series: list[SeriesPoint]) -> None:
        self.series = list(series)

    def set_range(self, axis_range: AxisRange) -> None:
        self.axis_range = axis_range

    def setup_grid(self) -> None:
        self.grid_builds += 1

    def draw(self) -> None:
        self.draws += 1

    @property
    def caption(self) -> str:
        return f"{self.name} -- {self.symbol}" if self.name else self.symbol

    def to_dict(self) -> dict:
        return {
            "symbol": self.symbol,
            "caption": self.caption,
            "value": self.series[-1][1] if self.series else None,
            "data": [[list(point) for point in self.series]],
            "options": chart_options(self.axis_range) if self.axis_range else {},
            "gridBuilds": self.grid_builds,
            "draws": self.draws,
        }


class InMemoryChartRenderer(IChartRenderer):
    def __init__(self) -> None:
        self._charts: dict[str, InMemoryChartHandle] = {}

    def create_chart(self, instruction: CreateChart) -> InMemoryChartHandle:
        handle = InMemoryChartHandle(instruction.symbol, instruction.name)
        handle.set_series(instruction.series)
        handle.set_range(instruction.range)
        handle.setup_grid()
        handle.draw()
        self._charts[instruction.symbol] = handle
        return handle

    def get(self, symbol: str) -> Optional[InMemoryChartHandle]:
        return self._charts.get(symbol)

    def snapshot(self) -> list[dict]:
        return [handle.to_dict() for handle in self._charts.values()]
