from fastapi import APIRouter, Depends

from stockly.routers.deps import get_controller
from stockly.schemas.watchlist import WatchlistAdd, WatchlistMembership
from stockly.services.watchlist_controller import WatchlistController

router = APIRouter(prefix="/api/watchlist", tags=["watchlist"])


@router.get("", response_model=list[str], summary="List watchlist symbols")
async def list_watchlist(controller: WatchlistController = Depends(get_controller)):
    """Return the persisted watchlist in insertion order. Duplicates are kept."""
    return controller.store.list()


@router.post("", response_model=list[str], status_code=201, summary="Add a symbol to the watchlist")
async def add_to_watchlist(body: WatchlistAdd, controller: WatchlistController = Depends(get_controller)):
    """Append a symbol to the watchlist and return the updated list.

    No uniqueness check is made: adding the same symbol twice stores it twice.
    """
    await controller.add_to_watchlist(body.symbol)
    return controller.store.list()


@router.get("/{symbol:path}", response_model=WatchlistMembership, summary="Check watchlist membership")
async def check_membership(symbol: str, controller: WatchlistController = Depends(get_controller)):
    return WatchlistMembership(symbol=symbol, in_watchlist=controller.is_in_watchlist(symbol))
