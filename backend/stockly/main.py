import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from stockly.config import settings as app_settings
from stockly.routers import quotes, search, state, watchlist
from stockly.services.market_data import get_provider
from stockly.services.watchlist_controller import WatchlistController
from stockly.services.watchlist_store import WatchlistStore

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=app_settings.log_level.upper(),
        format="%(asctime)s | %(levelname)-8s | %(name)s: %(message)s",
    )
    for noisy in ("httpx", "httpcore"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    if not app_settings.twelvedata_api_key:
        logger.warning("TWELVEDATA_API_KEY is not set; quote and price requests will be rejected upstream")

    store = await WatchlistStore.open(app_settings.watchlist_path)
    provider = get_provider(app_settings.market_data_provider)
    controller = WatchlistController(
        provider, store, debounce_delay=app_settings.search_debounce_seconds
    )
    app.state.store = store
    app.state.provider = provider
    app.state.controller = controller
    logger.info(f"Stockly started (provider={app_settings.market_data_provider}, watchlist={app_settings.watchlist_path})")

    yield

    await controller.aclose()
    await provider.aclose()
    await store.close()


app = FastAPI(
    title="Stockly",
    summary="Stock watchlist backend: debounced symbol search, quotes, and a persisted watchlist.",
    description=(
        "Stockly searches stock symbols, fetches quote change and real-time price from "
        "Twelve Data, and keeps a local watchlist.\n\n"
        "**Key concepts:**\n"
        "- The presentation state (query, search results, watchlist, fetched quotes, last error) "
        "is owned by a single controller and pushed to clients over SSE.\n"
        "- Query edits are debounced: only the last edit of a burst triggers a search, after "
        "a quiet period. Results of superseded searches are discarded.\n"
        "- The watchlist is an ordered list persisted in a local SQLite file; adding a symbol "
        "twice stores it twice.\n"
        "- Upstream failures are never retried.\n"
    ),
    version="1.0.0",
    lifespan=lifespan,
    openapi_tags=[
        {"name": "state", "description": "Presentation state, query intents, and the SSE state stream."},
        {"name": "search", "description": "Direct (non-debounced) symbol search."},
        {"name": "watchlist", "description": "Persisted watchlist: list, add, and membership checks."},
        {"name": "quotes", "description": "On-demand quote change and real-time price per symbol."},
        {"name": "system", "description": "Health checks and operational endpoints."},
    ],
)

app.include_router(state.router)
app.include_router(search.router)
app.include_router(watchlist.router)
app.include_router(quotes.router)


@app.get("/api/health", summary="Health check", tags=["system"])
async def health():
    """Return `{\"status\": \"ok\"}` when the service is running."""
    return {"status": "ok"}
