"""Shared test helpers — canned upstream payloads and a fake Twelve Data server."""

import httpx

from stockly.schemas.search import SearchResult

TEST_BASE_URL = "https://api.test"
TEST_API_KEY = "test-key"
# Short quiet period so controller tests stay fast; the 0.5 s default has its own tests
TEST_DEBOUNCE = 0.05


def search_entry(symbol: str, name: str | None = None, exchange: str = "NASDAQ", currency: str = "USD") -> dict:
    """One element of the upstream ``/symbol_search`` ``data`` array."""
    return {
        "symbol": symbol,
        "instrument_name": name or f"{symbol} Inc.",
        "exchange": exchange,
        "mic_code": "XNGS",
        "exchange_timezone": "America/New_York",
        "instrument_type": "Common Stock",
        "country": "United States",
        "currency": currency,
    }


def search_payload(*entries: dict) -> dict:
    return {"data": list(entries), "status": "ok"}


def make_result(symbol: str, name: str | None = None) -> SearchResult:
    return SearchResult(symbol=symbol, exchange="NASDAQ", currency="USD", name=name or f"{symbol} Inc.")


class FakeUpstream:
    """Routes upstream requests by path to canned bodies and records every request.

    A route value may be a JSON-able object, raw ``bytes``/``str`` body, an
    exception instance (raised as-is), or a callable taking the request.
    Unrouted paths answer with Twelve Data's error envelope.
    """

    def __init__(self):
        self.routes: dict[str, object] = {}
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request):
        self.requests.append(request)
        route = self.routes.get(request.url.path.lstrip("/"))
        if isinstance(route, Exception):
            raise route
        if callable(route):
            return route(request)
        if route is None:
            return httpx.Response(404, json={"code": 404, "message": "not found", "status": "error"})
        if isinstance(route, (bytes, str)):
            return httpx.Response(200, content=route)
        return httpx.Response(200, json=route)

    def calls(self, path: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path == f"/{path}"]

    @property
    def paths(self) -> list[str]:
        return [r.url.path for r in self.requests]
