"""Market-data provider registry — resolves a provider name to a provider class."""

from stockly.config import settings
from stockly.services.market_data.base import MarketDataProvider
from stockly.services.market_data.errors import (
    DecodeError,
    InvalidRequestError,
    MarketDataError,
    NetworkError,
)
from stockly.services.market_data.twelvedata import TwelveDataProvider

__all__ = [
    "MarketDataProvider",
    "TwelveDataProvider",
    "MarketDataError",
    "InvalidRequestError",
    "NetworkError",
    "DecodeError",
    "get_provider",
]

_PROVIDERS: dict[str, type[MarketDataProvider]] = {
    "twelvedata": TwelveDataProvider,
}


def get_provider(name: str | None = None, **kwargs) -> MarketDataProvider:
    """Instantiate a provider by name (defaults to the configured one)."""
    name = name or settings.market_data_provider
    cls = _PROVIDERS.get(name)
    if cls is None:
        raise ValueError(f"Unknown market data provider: {name!r}. Available: {list(_PROVIDERS)}")
    return cls(**kwargs)
