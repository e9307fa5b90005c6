import asyncio

import httpx
import pytest

from src.application.use_cases.subscribe_to_symbols import SubscribeToSymbolsUseCase
from src.domain.entities.feed_message import SubscribeRequest
from src.domain.ports.feed_subscriber_port import IFeedSubscriber
from src.domain.ports.symbol_source_port import ISymbolSource
from src.infrastructure.stock_list.httpx_symbol_source import HttpxSymbolSource


class StaticSymbolSource(ISymbolSource):
    def __init__(self, symbols):
        self._symbols = symbols

    async def list_symbols(self):
        return list(self._symbols)


class RecordingSubscriber(IFeedSubscriber):
    def __init__(self):
        self.requests = []

    async def subscribe(self, request):
        self.requests.append(request)


def mock_client(handler):
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def test_subscribes_every_symbol_in_order():
    subscriber = RecordingSubscriber()
    use_case = SubscribeToSymbolsUseCase(StaticSymbolSource(["ACME", "GLOBEX"]))

    subscribed = asyncio.run(use_case.execute(subscriber))

    assert subscribed == ["ACME", "GLOBEX"]
    assert subscriber.requests == [SubscribeRequest("ACME"), SubscribeRequest("GLOBEX")]
    assert subscriber.requests[0].as_dict() == {"symbol": "ACME"}


def test_skips_blank_and_duplicate_symbols():
    subscriber = RecordingSubscriber()
    use_case = SubscribeToSymbolsUseCase(StaticSymbolSource(["ACME", " ", "ACME", "INITECH"]))
    assert asyncio.run(use_case.execute(subscriber)) == ["ACME", "INITECH"]


def test_http_source_reads_symbols():
    def handler(request):
        assert request.url == "http://stocks.test/stocks"
        return httpx.Response(
            200,
            json=[{"symbol": "ACME", "name": "Acme"}, {"name": "no symbol"}, {"symbol": "GLOBEX"}],
        )

    source = HttpxSymbolSource("http://stocks.test/stocks", client=mock_client(handler))
    assert asyncio.run(source.list_symbols()) == ["ACME", "GLOBEX"]


def test_http_source_raises_on_error_status():
    source = HttpxSymbolSource(
        "http://stocks.test/stocks",
        client=mock_client(lambda request: httpx.Response(503)),
    )
    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(source.list_symbols())


def test_http_source_rejects_non_array_body():
    source = HttpxSymbolSource(
        "http://stocks.test/stocks",
        client=mock_client(lambda request: httpx.Response(200, json={"symbol": "ACME"})),
    )
    with pytest.raises(ValueError):
        asyncio.run(source.list_symbols())
