"""
Infrastructure adapter: stdlib logging -> IDiagnosticSink.
"""

import logging

from src.domain.entities.feed_message import UnrecognizedMessage
from src.domain.ports.diagnostic_sink_port import IDiagnosticSink

logger = logging.getLogger(__name__)


class LoggingDiagnosticSink(IDiagnosticSink):
    """Logs feed messages the engine does not handle, then forgets them."""

    def __init__(self, level: int = logging.INFO) -> None:
        self._level = level

    def record(self, message: UnrecognizedMessage) -> None:
        logger.log(self._level, "Unhandled feed message type=%r: %s", message.type, message.payload)
