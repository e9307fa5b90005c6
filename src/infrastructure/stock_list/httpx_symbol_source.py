"""
Infrastructure adapter: HTTP stock listing -> ISymbolSource.

Expects a JSON array of objects such as ``[{"symbol": "ACME", ...}, ...]``.
Only ``symbol`` is read; entries without one are skipped.
"""

import logging
from typing import Optional

import httpx

from src.domain.ports.symbol_source_port import ISymbolSource

logger = logging.getLogger(__name__)


class HttpxSymbolSource(ISymbolSource):
    def __init__(
        self,
        url: str,
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._url = url
        self._timeout = timeout
        self._client = client

    async def list_symbols(self) -> list[str]:
        """Fetch the listing.

        Raises:
            httpx.HTTPError: on transport failure or a non-2xx response.
            ValueError: if the body is not a JSON array.
        """
        if self._client is not None:
            response = await self._client.get(self._url, timeout=self._timeout)
        else:
            async with httpx.AsyncClient() as client:
                response = await client.get(self._url, timeout=self._timeout)
        response.raise_for_status()

        listing = response.json()
        if not isinstance(listing, list):
            raise ValueError(f"Expected a JSON array from {self._url}")

        symbols = [
            str(entry["symbol"])
            for entry in listing
            if isinstance(entry, dict) and entry.get("symbol")
        ]
        logger.debug("Fetched %d symbols from %s", len(symbols), self._url)
        return symbols
