"""SSE stream generation for controller state."""

import asyncio
import logging

from stockly.schemas.state import UIState
from stockly.services.watchlist_controller import WatchlistController

logger = logging.getLogger(__name__)


def format_state_event(state: UIState) -> str:
    return f"event: state\ndata: {state.model_dump_json()}\n\n"


async def state_event_generator(controller: WatchlistController):
    """Yield an SSE event with the full state, then one per state change.

    Snapshots produced faster than the client consumes them are coalesced:
    only the newest pending snapshot is sent.
    """
    queue: asyncio.Queue[UIState] = asyncio.Queue(maxsize=1)

    def _on_change(state: UIState) -> None:
        if queue.full():
            queue.get_nowait()
        queue.put_nowait(state)

    unsubscribe = controller.subscribe(_on_change)
    try:
        yield format_state_event(controller.state)
        while True:
            state = await queue.get()
            yield format_state_event(state)
    finally:
        unsubscribe()
        logger.debug("State stream closed")
