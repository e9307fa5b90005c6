import logging

from src.domain.entities.feed_message import UnrecognizedMessage
from src.infrastructure.observability.logging_diagnostic_sink import LoggingDiagnosticSink


def test_unrecognized_message_is_logged(caplog):
    sink = LoggingDiagnosticSink()
    with caplog.at_level(logging.INFO):
        sink.record(UnrecognizedMessage(type="heartbeat", payload={"type": "heartbeat", "seq": 3}))

    assert "Unhandled feed message type='heartbeat'" in caplog.text
    assert "'seq': 3" in caplog.text


def test_log_level_is_configurable(caplog):
    sink = LoggingDiagnosticSink(level=logging.DEBUG)
    with caplog.at_level(logging.INFO):
        sink.record(UnrecognizedMessage(type="news"))
    assert caplog.text == ""

    with caplog.at_level(logging.DEBUG):
        sink.record(UnrecognizedMessage(type="news"))
    assert "type='news'" in caplog.text
