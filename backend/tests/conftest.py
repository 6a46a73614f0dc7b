import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from stockly.main import app
from stockly.routers.deps import get_controller, get_market_data
from stockly.services.market_data import TwelveDataProvider
from stockly.services.watchlist_controller import WatchlistController
from stockly.services.watchlist_store import WatchlistStore
from tests.helpers import TEST_API_KEY, TEST_BASE_URL, TEST_DEBOUNCE, FakeUpstream


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture
async def provider(upstream):
    p = TwelveDataProvider(
        TEST_BASE_URL, TEST_API_KEY, transport=httpx.MockTransport(upstream.handler)
    )
    yield p
    await p.aclose()


@pytest.fixture
async def store(tmp_path):
    s = await WatchlistStore.open(tmp_path / "watchlist.db")
    yield s
    await s.close()


@pytest.fixture
async def controller(provider, store):
    c = WatchlistController(provider, store, debounce_delay=TEST_DEBOUNCE)
    yield c
    await c.aclose()


@pytest.fixture
async def client(controller, provider):
    app.dependency_overrides[get_controller] = lambda: controller
    app.dependency_overrides[get_market_data] = lambda: provider
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()
