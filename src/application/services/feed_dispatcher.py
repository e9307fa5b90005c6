"""
Application service: routes decoded feed messages to per-symbol chart state.

One dispatcher is constructed per session and owns the symbol -> ChartState
table. Messages are handled one at a time, to completion, by a single
consumer; nothing that arrives on the feed can raise out of on_message.

Routing:
  - stockhistory: look up or create the ChartState and seed it. A second
    history for the same symbol re-seeds the existing chart.
  - stockupdate:  append to the symbol's ChartState; dropped if none exists.
  - anything else: handed to the diagnostic sink.
"""

import logging
from typing import Iterator, Optional, Union

from src.application.services.chart_state import ChartState
from src.domain.entities.chart_instruction import CreateChart, UpdateChart
from src.domain.entities.feed_message import (
    StockHistoryMessage,
    StockUpdateMessage,
    UnrecognizedMessage,
)
from src.domain.errors import InvalidInput, ParseError, UnknownSymbol
from src.domain.ports.chart_renderer_port import IChartRenderer
from src.domain.ports.diagnostic_sink_port import IDiagnosticSink
from src.domain.ports.feed_message_decoder_port import IFeedMessageDecoder

logger = logging.getLogger(__name__)

ChartInstruction = Union[CreateChart, UpdateChart]


class FeedDispatcher:
    def __init__(
        self,
        decoder: IFeedMessageDecoder,
        renderer: IChartRenderer,
        diagnostics: IDiagnosticSink,
    ) -> None:
        self._decoder = decoder
        self._renderer = renderer
        self._diagnostics = diagnostics
        self._charts: dict[str, ChartState] = {}

    def on_message(self, raw: Union[str, bytes]) -> Optional[ChartInstruction]:
        """Decode and apply one feed message.

        Returns:
            The instruction issued to the renderer, or None when the message
            was dropped or did not touch a chart.
        """
        try:
            message = self._decoder.decode(raw)
        except ParseError as exc:
            logger.warning("Dropping malformed feed message: %s", exc)
            return None

        if isinstance(message, StockHistoryMessage):
            return self._on_history(message)
        if isinstance(message, StockUpdateMessage):
            return self._on_update(message)

        self._diagnostics.record(message)
        return None

    def _on_history(self, message: StockHistoryMessage) -> Optional[CreateChart]:
        state = self._charts.get(message.symbol)
        is_new = state is None
        if is_new:
            state = ChartState(message.symbol, self._renderer)
        try:
            instruction = state.seed(message.history, name=message.name)
        except InvalidInput as exc:
            logger.warning("Dropping history for %s: %s", message.symbol, exc)
            return None

        if is_new:
            self._charts[message.symbol] = state
            logger.info(
                "Created chart for %s (%d prices)", message.symbol, len(message.history)
            )
        else:
            logger.info("Re-seeded chart for %s", message.symbol)
        return instruction

    def _on_update(self, message: StockUpdateMessage) -> Optional[UpdateChart]:
        state = self._charts.get(message.symbol)
        if state is None:
            logger.debug("Dropping update for unknown symbol %s", message.symbol)
            return None
        try:
            return state.append(message.price)
        except InvalidInput as exc:
            logger.warning("Dropping update for %s: %s", message.symbol, exc)
            return None

    def chart(self, symbol: str) -> ChartState:
        """Raises UnknownSymbol if no history has been received for *symbol*."""
        try:
            return self._charts[symbol]
        except KeyError:
            raise UnknownSymbol(symbol) from None

    def symbols(self) -> list[str]:
        return list(self._charts)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._charts

    def __len__(self) -> int:
        return len(self._charts)

    def __iter__(self) -> Iterator[ChartState]:
        return iter(self._charts.values())
