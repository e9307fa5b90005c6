"""
Port (interface) for the charting backend.
Infrastructure adapters (e.g. InMemoryChartRenderer) must implement this interface.

The engine depends on two capabilities of a chart: replacing its series and
replacing its axis range with a grid rebuild. A re-seed may also rename the
caption. Everything else about the backend stays behind these interfaces so
any charting library can be used.
"""

from abc import ABC, abstractmethod

from src.domain.entities.axis_range import AxisRange
from src.domain.entities.chart_instruction import CreateChart, SeriesPoint


class IChartHandle(ABC):
    """Back-reference to a chart owned by the rendering layer."""

    @abstractmethod
    def set_name(self, name: str) -> None:
        """Replace the display name shown in the chart caption."""
        ...

    @abstractmethod
    def set_series(self, series: list[SeriesPoint]) -> None: ...

    @abstractmethod
    def set_range(self, axis_range: AxisRange) -> None: ...

    @abstractmethod
    def setup_grid(self) -> None:
        """Recompute gridlines after a range change."""
        ...

    @abstractmethod
    def draw(self) -> None: ...


class IChartRenderer(ABC):
    @abstractmethod
    def create_chart(self, instruction: CreateChart) -> IChartHandle:
        """Create and draw a new chart, returning a handle for later updates."""
        ...
