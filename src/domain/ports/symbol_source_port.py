"""
Port (interface) for the initial symbol list.
Infrastructure adapters (e.g. HttpxSymbolSource) must implement this interface.
"""

from abc import ABC, abstractmethod


class ISymbolSource(ABC):
    @abstractmethod
    async def list_symbols(self) -> list[str]:
        """Return the symbols of every listed stock, in listing order."""
        ...
