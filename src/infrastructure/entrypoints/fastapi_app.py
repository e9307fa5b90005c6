"""
FastAPI entry point: live chart server.

This module is the Composition Root: it wires all infrastructure adapters and
passes them to the application layer. The push feed connects to ``/feed`` as a
WebSocket; on connect the server sends a subscribe request for every listed
symbol and then applies each frame to the chart engine, one at a time.

Run locally:
    uvicorn src.infrastructure.entrypoints.fastapi_app:app --reload --port 8000
"""

import logging
import os

import httpx
from dotenv import load_dotenv
from fastapi import Depends, FastAPI, HTTPException, Request, WebSocket

load_dotenv()

from src.application.services.feed_dispatcher import FeedDispatcher
from src.application.use_cases.subscribe_to_symbols import SubscribeToSymbolsUseCase
from src.domain.entities.feed_message import SubscribeRequest
from src.domain.errors import UnknownSymbol
from src.domain.ports.feed_subscriber_port import IFeedSubscriber
from src.domain.ports.symbol_source_port import ISymbolSource
from src.infrastructure.feed.pydantic_message_decoder import PydanticFeedMessageDecoder
from src.infrastructure.observability.logging_diagnostic_sink import LoggingDiagnosticSink
from src.infrastructure.rendering.in_memory_chart_renderer import InMemoryChartRenderer
from src.infrastructure.stock_list.httpx_symbol_source import HttpxSymbolSource

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Composition Root: wire all dependencies once at startup
# ---------------------------------------------------------------------------
_renderer = InMemoryChartRenderer()
_dispatcher = FeedDispatcher(
    decoder=PydanticFeedMessageDecoder(),
    renderer=_renderer,
    diagnostics=LoggingDiagnosticSink(),
)
_symbol_source = HttpxSymbolSource(
    url=os.environ.get("STOCK_LIST_URL", "http://localhost:9000/stocks"),
    timeout=float(os.environ.get("STOCK_LIST_TIMEOUT", "10")),
)


def get_dispatcher() -> FeedDispatcher:
    return _dispatcher


def get_renderer() -> InMemoryChartRenderer:
    return _renderer


def get_symbol_source() -> ISymbolSource:
    return _symbol_source


class WebSocketFeedSubscriber(IFeedSubscriber):
    """Sends subscribe requests back over the feed's own WebSocket."""

    def __init__(self, websocket: WebSocket) -> None:
        self._websocket = websocket

    async def subscribe(self, request: SubscribeRequest) -> None:
        await self._websocket.send_json(request.as_dict())


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(title="Live Stock Charts")


@app.websocket("/feed")
async def feed(
    websocket: WebSocket,
    dispatcher: FeedDispatcher = Depends(get_dispatcher),
    source: ISymbolSource = Depends(get_symbol_source),
):
    """Subscribe the connected feed to every listed symbol, then consume it."""
    await websocket.accept()
    try:
        await SubscribeToSymbolsUseCase(source).execute(WebSocketFeedSubscriber(websocket))
    except (httpx.HTTPError, ValueError) as exc:
        # the feed may still push symbols subscribed by earlier sessions
        logger.error("Could not fetch the symbol list: %s", exc)
    while True:
        frame = await websocket.receive()
        if frame["type"] == "websocket.disconnect":
            logger.info("Feed disconnected")
            return
        # binary frames go through the decoder too; bad bytes become a ParseError
        raw = frame.get("text")
        dispatcher.on_message(raw if raw is not None else frame.get("bytes", b""))


@app.post("/feed")
async def post_feed_message(
    request: Request,
    dispatcher: FeedDispatcher = Depends(get_dispatcher),
):
    """Apply one raw feed message and return the issued instruction, if any."""
    instruction = dispatcher.on_message(await request.body())
    return {"instruction": instruction.as_dict() if instruction else None}


@app.get("/charts")
async def list_charts(renderer: InMemoryChartRenderer = Depends(get_renderer)):
    return renderer.snapshot()


@app.get("/charts/{symbol}")
async def get_chart(
    symbol: str,
    dispatcher: FeedDispatcher = Depends(get_dispatcher),
    renderer: InMemoryChartRenderer = Depends(get_renderer),
):
    try:
        state = dispatcher.chart(symbol)
    except UnknownSymbol as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return {
        "symbol": state.symbol,
        "name": state.name,
        "phase": state.phase.value,
        "prices": state.prices,
        "range": state.range.as_dict(),
        "chart": renderer.get(symbol).to_dict(),
    }


@app.get("/health")
async def health():
    return {"status": "ok"}
