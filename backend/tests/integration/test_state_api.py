"""Integration tests for the state router — debounced query intents end to end."""

import asyncio

import pytest

from tests.helpers import TEST_DEBOUNCE, search_entry, search_payload

pytestmark = pytest.mark.asyncio(loop_scope="function")


class TestState:
    async def test_initial_state(self, client):
        resp = await client.get("/api/state")
        assert resp.status_code == 200
        assert resp.json() == {
            "query": "",
            "search_results": [],
            "watchlist": [],
            "quotes": {},
            "error": None,
        }

    async def test_query_is_debounced_then_applied(self, client, controller, upstream):
        upstream.routes["symbol_search"] = search_payload(search_entry("AAPL", "Apple Inc."))

        for partial in ("A", "AA", "AAP", "AAPL"):
            resp = await client.put("/api/state/query", json={"query": partial})
            assert resp.status_code == 200
        assert resp.json()["query"] == "AAPL"
        assert resp.json()["search_results"] == []

        await controller.wait_idle()

        assert len(upstream.calls("symbol_search")) == 1
        data = (await client.get("/api/state")).json()
        assert len(data["search_results"]) == 1
        result = data["search_results"][0]
        assert result["symbol"] == "AAPL"
        assert result["name"] == "Apple Inc."
        assert result["exchange"] == "NASDAQ"
        assert result["currency"] == "USD"

    async def test_empty_query_clears_results(self, client, controller, upstream):
        upstream.routes["symbol_search"] = search_payload(search_entry("AAPL"))
        await client.put("/api/state/query", json={"query": "AAPL"})
        await controller.wait_idle()

        resp = await client.put("/api/state/query", json={"query": ""})
        await asyncio.sleep(TEST_DEBOUNCE * 3)

        assert resp.json()["search_results"] == []
        assert len(upstream.calls("symbol_search")) == 1

    async def test_empty_query_while_searching_keeps_results(self, client, controller, upstream):
        upstream.routes["symbol_search"] = search_payload(search_entry("AAPL"))
        await client.put("/api/state/query", json={"query": "AAPL"})
        await controller.wait_idle()

        resp = await client.put("/api/state/query", json={"query": "", "searching": True})

        assert len(resp.json()["search_results"]) == 1

    async def test_clear(self, client, controller, upstream):
        upstream.routes["symbol_search"] = search_payload(search_entry("AAPL"))
        await client.put("/api/state/query", json={"query": "AAPL"})
        await controller.wait_idle()

        resp = await client.post("/api/state/clear")

        assert resp.status_code == 200
        assert resp.json()["search_results"] == []

    async def test_upstream_failure_surfaces_in_state(self, client, controller, upstream):
        upstream.routes["symbol_search"] = {"code": 401, "message": "invalid api key", "status": "error"}
        await client.put("/api/state/query", json={"query": "AAPL"})
        await controller.wait_idle()

        data = (await client.get("/api/state")).json()
        assert "invalid api key" in data["error"]
        assert data["search_results"] == []

    async def test_long_query_fires_once(self, client, controller, upstream):
        upstream.routes["symbol_search"] = search_payload()
        query = "A" * 120

        resp = await client.put("/api/state/query", json={"query": query})
        assert resp.status_code == 200
        await controller.wait_idle()

        [request] = upstream.calls("symbol_search")
        assert request.url.params["symbol"] == query
