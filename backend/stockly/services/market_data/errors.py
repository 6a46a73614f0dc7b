"""Failure taxonomy for market-data requests. None of these are retried."""


class MarketDataError(Exception):
    """Base class for every market-data failure."""


class InvalidRequestError(MarketDataError):
    """The request URL could not be constructed."""


class NetworkError(MarketDataError):
    """Transport-level failure (DNS, connect, reset, timeout)."""


class DecodeError(MarketDataError):
    """The response body does not match the expected JSON shape."""
