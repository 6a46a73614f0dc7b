from fastapi import APIRouter, Depends

from stockly.routers.deps import get_controller, market_data_http_error
from stockly.schemas.quote import QuoteSnapshot
from stockly.services.market_data import MarketDataError
from stockly.services.watchlist_controller import WatchlistController

router = APIRouter(prefix="/api/quotes", tags=["quotes"])


@router.get("/{symbol:path}", response_model=QuoteSnapshot, summary="Fetch change and price for a symbol")
async def get_quote(symbol: str, controller: WatchlistController = Depends(get_controller)):
    """Fetch the quote change and the real-time price for one symbol.

    Values are passed through as the strings reported upstream; a missing value
    is reported as `"0"`. The snapshot is also published on the state stream.
    Nothing is cached: every call hits the provider twice.
    """
    try:
        return await controller.fetch_price(symbol)
    except MarketDataError as e:
        raise market_data_http_error(e) from e
