"""Shared router dependencies and helpers."""

from fastapi import HTTPException, Request

from stockly.services.market_data import InvalidRequestError, MarketDataError, MarketDataProvider
from stockly.services.watchlist_controller import WatchlistController


def get_controller(request: Request) -> WatchlistController:
    """Return the controller created in the app lifespan."""
    return request.app.state.controller


def get_market_data(request: Request) -> MarketDataProvider:
    """Return the market-data provider created in the app lifespan."""
    return request.app.state.provider


def market_data_http_error(exc: MarketDataError) -> HTTPException:
    """Map a market-data failure to 400 (bad request) or 502 (upstream failure)."""
    if isinstance(exc, InvalidRequestError):
        return HTTPException(400, str(exc))
    return HTTPException(502, str(exc))
