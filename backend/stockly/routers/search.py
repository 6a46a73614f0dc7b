from fastapi import APIRouter, Depends, Query

from stockly.routers.deps import get_market_data, market_data_http_error
from stockly.schemas.search import SearchResult
from stockly.services.market_data import MarketDataError, MarketDataProvider

router = APIRouter(prefix="/api/search", tags=["search"])


@router.get("", response_model=list[SearchResult], summary="Search ticker symbols")
async def search_symbols(
    q: str = Query(..., min_length=1),
    provider: MarketDataProvider = Depends(get_market_data),
):
    """Search instruments by symbol or name, immediately and without debouncing.

    Interactive clients should prefer `PUT /api/state/query`, which debounces
    keystrokes and publishes results on the state stream.
    """
    try:
        return await provider.search_symbol(q)
    except MarketDataError as e:
        raise market_data_http_error(e) from e
