import pytest

from src.application.services.feed_dispatcher import FeedDispatcher
from src.infrastructure.feed.pydantic_message_decoder import PydanticFeedMessageDecoder
from src.infrastructure.rendering.in_memory_chart_renderer import InMemoryChartRenderer
from src.domain.ports.diagnostic_sink_port import IDiagnosticSink


class RecordingDiagnosticSink(IDiagnosticSink):
    def __init__(self):
        self.messages = []

    def record(self, message):
        self.messages.append(message)


@pytest.fixture
def renderer():
    return InMemoryChartRenderer()


@pytest.fixture
def diagnostics():
    return RecordingDiagnosticSink()


@pytest.fixture
def dispatcher(renderer, diagnostics):
    return FeedDispatcher(
        decoder=PydanticFeedMessageDecoder(),
        renderer=renderer,
        diagnostics=diagnostics,
    )
