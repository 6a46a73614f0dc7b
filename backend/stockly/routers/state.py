from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse

from stockly.routers.deps import get_controller
from stockly.schemas.state import QueryUpdate, UIState
from stockly.services.state_stream import state_event_generator
from stockly.services.watchlist_controller import WatchlistController

router = APIRouter(prefix="/api/state", tags=["state"])


@router.get("", response_model=UIState, summary="Current presentation state")
async def get_state(controller: WatchlistController = Depends(get_controller)):
    return controller.state


@router.put("/query", response_model=UIState, summary="Update the search query")
async def update_query(body: QueryUpdate, controller: WatchlistController = Depends(get_controller)):
    """Set the search text. The search itself runs after a quiet period
    (`SEARCH_DEBOUNCE_SECONDS`, 0.5 s by default) and its results arrive on
    the state stream.

    An empty query cancels any pending search and clears results, unless
    `searching` is true.
    """
    controller.search(body.query, searching=body.searching)
    return controller.state


@router.post("/clear", response_model=UIState, summary="Clear search results")
async def clear_results(controller: WatchlistController = Depends(get_controller)):
    controller.clear()
    return controller.state


@router.get(
    "/stream",
    summary="SSE stream of presentation state",
    responses={200: {"content": {"text/event-stream": {}}, "description": "Server-Sent Events stream. Each event is `event: state` with the full UIState as JSON; the first event is sent immediately."}},
)
async def stream_state(controller: WatchlistController = Depends(get_controller)):
    return StreamingResponse(
        state_event_generator(controller),
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "X-Accel-Buffering": "no",
        },
    )
