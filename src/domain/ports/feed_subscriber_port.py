"""
Port (interface) for sending subscribe requests to the push feed.
The concrete adapter wraps whatever transport carries the feed.
"""

from abc import ABC, abstractmethod

from src.domain.entities.feed_message import SubscribeRequest


class IFeedSubscriber(ABC):
    @abstractmethod
    async def subscribe(self, request: SubscribeRequest) -> None: ...
