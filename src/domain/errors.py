"""
Exception types raised by the chart engine.
Zero external dependencies.

Domain and application code raise these; only FeedDispatcher catches them,
so a bad message never takes the engine down.
"""


class ChartEngineError(Exception):
    """Base class for every error raised by the chart engine."""


class ParseError(ChartEngineError):
    """A feed message could not be decoded into a known shape."""


class InvalidInput(ChartEngineError, ValueError):
    """A value is outside what the engine accepts (e.g. an empty price history)."""


class UnknownSymbol(ChartEngineError, KeyError):
    """No chart state exists for the requested symbol."""

    def __init__(self, symbol: str) -> None:
        super().__init__(symbol)
        self.symbol = symbol

    def __str__(self) -> str:
        return f"No chart for symbol: {self.symbol!r}"
