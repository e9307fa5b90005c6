"""
Port (interface) for decoding raw feed payloads.
Infrastructure adapters (e.g. PydanticFeedMessageDecoder) must implement this interface.
"""

from abc import ABC, abstractmethod

from src.domain.entities.feed_message import FeedMessage


class IFeedMessageDecoder(ABC):
    @abstractmethod
    def decode(self, raw: str | bytes) -> FeedMessage:
        """Decode one feed payload.

        Raises:
            ParseError: if the payload is not a well-formed message.
        """
        ...
