"""Twelve Data provider — symbol search, quote change and real-time price over HTTP."""

import logging
from typing import TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from stockly.config import settings
from stockly.schemas.quote import PricePayload, QuoteChangePayload
from stockly.schemas.search import SearchResult, SymbolSearchPayload
from stockly.services.market_data.base import MarketDataProvider
from stockly.services.market_data.errors import DecodeError, InvalidRequestError, NetworkError

logger = logging.getLogger(__name__)

SEARCH_PATH = "symbol_search"
QUOTE_PATH = "quote"
PRICE_PATH = "price"

_M = TypeVar("_M", bound=BaseModel)


class TwelveDataProvider(MarketDataProvider):
    """Client for https://api.twelvedata.com.

    One ``httpx.AsyncClient`` is held for the provider's lifetime; call
    ``aclose()`` when done. ``transport`` is exposed so tests can plug in
    ``httpx.MockTransport``.
    """

    def __init__(
        self,
        base_url: str | None = None,
        api_key: str | None = None,
        *,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url if base_url is not None else settings.twelvedata_base_url
        self.api_key = api_key if api_key is not None else settings.twelvedata_api_key
        self._client = httpx.AsyncClient(
            timeout=timeout if timeout is not None else settings.http_timeout,
            transport=transport,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    def _build_url(self, path: str, params: dict[str, str]) -> httpx.URL:
        try:
            for value in params.values():
                value.encode("utf-8")
            url = httpx.URL(f"{self.base_url.rstrip('/')}/{path}", params=params)
        except (httpx.InvalidURL, UnicodeEncodeError) as e:
            raise InvalidRequestError(f"Cannot build URL for /{path}: {e}") from e

        if url.scheme not in ("http", "https") or not url.host:
            raise InvalidRequestError(f"Invalid base URL: {self.base_url!r}")
        return url

    async def _get(self, path: str, params: dict[str, str], model: type[_M]) -> _M:
        url = self._build_url(path, params)
        logger.debug("GET /%s symbol=%s", path, params.get("symbol"))

        try:
            resp = await self._client.get(url)
        except httpx.RequestError as e:
            raise NetworkError(f"GET /{path} failed: {e}") from e

        try:
            body = resp.json()
        except ValueError as e:
            if not resp.is_success:
                raise NetworkError(f"/{path} returned HTTP {resp.status_code}") from e
            raise DecodeError(f"/{path} returned non-JSON body (HTTP {resp.status_code})") from e

        # Twelve Data reports errors in-band, often with HTTP 200
        if isinstance(body, dict) and body.get("status") == "error":
            raise DecodeError(f"/{path} returned an error: {body.get('message') or 'unknown error'}")

        if not resp.is_success:
            raise NetworkError(f"/{path} returned HTTP {resp.status_code}")

        try:
            return model.model_validate(body)
        except ValidationError as e:
            raise DecodeError(f"/{path} returned an unexpected shape: {e.error_count()} validation error(s)") from e

    async def search_symbol(self, query: str) -> list[SearchResult]:
        payload = await self._get(SEARCH_PATH, {"symbol": query}, SymbolSearchPayload)
        logger.info("Symbol search %r returned %d results", query, len(payload.data))
        return payload.data

    async def fetch_quote_change(self, symbol: str) -> str:
        payload = await self._get(QUOTE_PATH, {"symbol": symbol, "apikey": self.api_key}, QuoteChangePayload)
        return payload.change if payload.change is not None else "0"

    async def fetch_real_time_price(self, symbol: str) -> str:
        payload = await self._get(PRICE_PATH, {"symbol": symbol, "apikey": self.api_key}, PricePayload)
        return payload.price if payload.price is not None else "0"
