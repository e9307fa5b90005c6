import json

import pytest

from src.domain.entities.feed_message import (
    StockHistoryMessage,
    StockUpdateMessage,
    UnrecognizedMessage,
)
from src.domain.errors import ParseError
from src.infrastructure.feed.pydantic_message_decoder import PydanticFeedMessageDecoder


@pytest.fixture
def decoder():
    return PydanticFeedMessageDecoder()


def test_decodes_history(decoder):
    raw = json.dumps({"type": "stockhistory", "symbol": "ACME", "name": "Acme Corp", "history": [10, 12.5]})
    assert decoder.decode(raw) == StockHistoryMessage(symbol="ACME", name="Acme Corp", history=[10.0, 12.5])


def test_history_name_is_optional(decoder):
    raw = json.dumps({"type": "stockhistory", "symbol": "ACME", "history": []})
    assert decoder.decode(raw) == StockHistoryMessage(symbol="ACME", name="", history=[])


def test_decodes_update_from_bytes(decoder):
    raw = json.dumps({"type": "stockupdate", "symbol": "ACME", "price": 9}).encode()
    assert decoder.decode(raw) == StockUpdateMessage(symbol="ACME", price=9.0)


def test_unknown_type_is_not_an_error(decoder):
    message = decoder.decode('{"type": "news", "headline": "hi"}')
    assert isinstance(message, UnrecognizedMessage)
    assert message.type == "news"


@pytest.mark.parametrize(
    "raw",
    [
        "",
        "{",
        "42",
        '"stockupdate"',
        '{"symbol": "ACME", "price": 1}',
        '{"type": "stockupdate", "symbol": "ACME"}',
        '{"type": "stockupdate", "symbol": "ACME", "price": NaN}',
        '{"type": "stockhistory", "symbol": "ACME", "history": [1, "x"]}',
        '{"type": "stockhistory", "history": [1, 2]}',
        "[" * 200000,
    ],
)
def test_malformed_payloads_raise_parse_error(decoder, raw):
    with pytest.raises(ParseError):
        decoder.decode(raw)
