"""
Infrastructure adapter: JSON + pydantic -> IFeedMessageDecoder.

Wire-format validation is confined here; the rest of the codebase only sees
the domain message dataclasses. An empty history is valid on the wire and is
rejected later by the domain, so it is not checked here.
"""

import json
from typing import Literal

from pydantic import BaseModel, FiniteFloat, ValidationError

from src.domain.entities.feed_message import (
    FeedMessage,
    StockHistoryMessage,
    StockUpdateMessage,
    UnrecognizedMessage,
)
from src.domain.errors import ParseError
from src.domain.ports.feed_message_decoder_port import IFeedMessageDecoder


class StockHistoryPayload(BaseModel):
    type: Literal["stockhistory"]
    symbol: str
    name: str = ""
    history: list[FiniteFloat]


class StockUpdatePayload(BaseModel):
    type: Literal["stockupdate"]
    symbol: str
    price: FiniteFloat


class PydanticFeedMessageDecoder(IFeedMessageDecoder):
    """Decodes the JSON text frames pushed by the stock feed."""

    def decode(self, raw: str | bytes) -> FeedMessage:
        try:
            data = json.loads(raw)
        except (TypeError, ValueError, RecursionError) as exc:
            raise ParseError(f"Undecodable payload: {exc}") from exc

        if not isinstance(data, dict):
            raise ParseError(f"Expected a JSON object, got {type(data).__name__}")
        if "type" not in data:
            raise ParseError("Message has no 'type' field")

        kind = data["type"]
        try:
            if kind == "stockhistory":
                payload = StockHistoryPayload.model_validate(data)
                return StockHistoryMessage(
                    symbol=payload.symbol,
                    name=payload.name,
                    history=list(payload.history),
                )
            if kind == "stockupdate":
                payload = StockUpdatePayload.model_validate(data)
                return StockUpdateMessage(symbol=payload.symbol, price=payload.price)
        except ValidationError as exc:
            raise ParseError(f"Invalid {kind} message: {exc}") from exc

        return UnrecognizedMessage(type=kind, payload=data)
