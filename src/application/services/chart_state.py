"""
Application service: per-symbol chart state.

Binds one PriceWindow to one chart handle and owns the axis-range policy:
the cached range only ever widens, and the grid is rebuilt only when it does.
The handle is a back-reference; the rendering layer owns the chart itself.
"""

import enum
from typing import Iterable, Optional

from src.domain.entities.axis_range import AxisRange, check_price
from src.domain.entities.chart_instruction import CreateChart, UpdateChart, indexed_series
from src.domain.entities.price_window import PriceWindow
from src.domain.ports.chart_renderer_port import IChartHandle, IChartRenderer


class ChartPhase(enum.Enum):
    UNINITIALIZED = "uninitialized"
    SEEDED = "seeded"
    UPDATED = "updated"


class ChartState:
    def __init__(self, symbol: str, renderer: IChartRenderer) -> None:
        self._symbol = symbol
        self._renderer = renderer
        self._name = ""
        self._phase = ChartPhase.UNINITIALIZED
        self._window: Optional[PriceWindow] = None
        self._range: Optional[AxisRange] = None
        self._handle: Optional[IChartHandle] = None

    @property
    def symbol(self) -> str:
        return self._symbol

    @property
    def name(self) -> str:
        return self._name

    @property
    def phase(self) -> ChartPhase:
        return self._phase

    @property
    def range(self) -> Optional[AxisRange]:
        return self._range

    @property
    def prices(self) -> list[float]:
        return self._window.snapshot() if self._window is not None else []

    @property
    def latest_price(self) -> Optional[float]:
        return self._window.latest if self._window is not None else None

    def seed(self, history: Iterable[float], name: str = "") -> CreateChart:
        """Load the full history and draw the chart.

        The first seed asks the renderer for a new chart. Seeding again
        overwrites the window and range and redraws the same chart in place.

        Raises:
            InvalidInput: if *history* is empty. The state is left untouched.
        """
        window = PriceWindow.seed(history)
        prices = window.snapshot()
        axis_range = AxisRange.compute(prices)
        instruction = CreateChart(
            symbol=self._symbol,
            name=name,
            series=indexed_series(prices),
            range=axis_range,
        )

        if self._handle is None:
            self._handle = self._renderer.create_chart(instruction)
        else:
            self._handle.set_name(name)
            self._handle.set_series(instruction.series)
            self._handle.set_range(axis_range)
            self._handle.setup_grid()
            self._handle.draw()

        self._window = window
        self._range = axis_range
        self._name = name
        self._phase = ChartPhase.SEEDED
        return instruction

    def append(self, price: float) -> Optional[UpdateChart]:
        """Push one new price and redraw.

        Ignored (returns None) until the state has been seeded.

        Raises:
            InvalidInput: if *price* would overflow the padded axis range.
                The window is left untouched.
        """
        if self._phase is ChartPhase.UNINITIALIZED:
            return None

        self._window.append(check_price(price))
        prices = self._window.snapshot()
        rebuild_grid = AxisRange.is_stale(self._range, prices)
        if rebuild_grid:
            self._range = self._range.widen(AxisRange.compute(prices))

        instruction = UpdateChart(
            symbol=self._symbol,
            series=indexed_series(prices),
            range=self._range,
            rebuild_grid=rebuild_grid,
            latest_price=self._window.latest,
        )
        self._handle.set_series(instruction.series)
        if rebuild_grid:
            self._handle.set_range(self._range)
            self._handle.setup_grid()
        self._handle.draw()

        self._phase = ChartPhase.UPDATED
        return instruction

    def __repr__(self) -> str:
        return f"ChartState(symbol={self._symbol!r}, phase={self._phase.value})"
