"""Abstract base class for market-data providers."""

from abc import ABC, abstractmethod

from stockly.schemas.search import SearchResult


class MarketDataProvider(ABC):
    """Provider interface for symbol search and point-in-time quotes.

    Implementations wrap a specific data source. Every method raises a
    ``MarketDataError`` subclass on failure and never retries.
    """

    @abstractmethod
    async def search_symbol(self, query: str) -> list[SearchResult]:
        """Search instruments by symbol or name. An empty list is a valid result."""

    @abstractmethod
    async def fetch_quote_change(self, symbol: str) -> str:
        """Return the absolute change since the previous close ("0" when unknown)."""

    @abstractmethod
    async def fetch_real_time_price(self, symbol: str) -> str:
        """Return the latest traded price ("0" when unknown)."""

    async def fetch_stock_price(self, symbol: str) -> tuple[str, str]:
        """Fetch ``(change, price)`` for a symbol.

        The two calls run sequentially, change first. The first failure
        aborts the operation; a successful change is discarded if the price
        call fails.
        """
        change = await self.fetch_quote_change(symbol)
        price = await self.fetch_real_time_price(symbol)
        return change, price

    async def aclose(self) -> None:
        """Release network resources held by the provider."""
