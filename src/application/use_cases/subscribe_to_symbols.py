"""
Use-case: subscribe the push feed to every listed stock.
Depends only on Domain ports and entities; no infrastructure imports.
"""

import logging

from src.domain.entities.feed_message import SubscribeRequest
from src.domain.ports.feed_subscriber_port import IFeedSubscriber
from src.domain.ports.symbol_source_port import ISymbolSource

logger = logging.getLogger(__name__)


class SubscribeToSymbolsUseCase:
    def __init__(self, source: ISymbolSource) -> None:
        self._source = source

    async def execute(self, subscriber: IFeedSubscriber) -> list[str]:
        """Fetch the symbol list and send one subscribe request per symbol.

        Blank and repeated symbols are skipped.

        Returns:
            The symbols that were subscribed, in listing order.
        """
        subscribed: list[str] = []
        for symbol in await self._source.list_symbols():
            symbol = symbol.strip() if symbol else ""
            if not symbol or symbol in subscribed:
                continue
            await subscriber.subscribe(SubscribeRequest(symbol=symbol))
            subscribed.append(symbol)

        logger.info("Subscribed to %d symbols", len(subscribed))
        return subscribed
