"""
Domain entities for messages exchanged with the push feed.
Zero external dependencies: pure Python dataclasses only.
"""

from dataclasses import dataclass, field
from typing import Any, Union


@dataclass(frozen=True)
class StockHistoryMessage:
    symbol: str
    name: str
    history: list[float]


@dataclass(frozen=True)
class StockUpdateMessage:
    symbol: str
    price: float


@dataclass(frozen=True)
class UnrecognizedMessage:
    """A decodable message whose ``type`` the engine does not handle."""

    type: Any
    payload: dict = field(default_factory=dict)


@dataclass(frozen=True)
class SubscribeRequest:
    symbol: str

    def as_dict(self) -> dict:
        return {"symbol": self.symbol}


FeedMessage = Union[StockHistoryMessage, StockUpdateMessage, UnrecognizedMessage]
