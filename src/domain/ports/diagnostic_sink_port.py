"""
Port (interface) for the diagnostic sink that receives unhandled feed messages.
Infrastructure adapters (e.g. LoggingDiagnosticSink) must implement this interface.
"""

from abc import ABC, abstractmethod

from src.domain.entities.feed_message import UnrecognizedMessage


class IDiagnosticSink(ABC):
    @abstractmethod
    def record(self, message: UnrecognizedMessage) -> None: ...
