"""Debounce query edits into a single delayed search per burst."""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable

logger = logging.getLogger(__name__)

DEFAULT_DELAY = 0.5


class DebounceHandle:
    """Cancellable handle for one scheduled call.

    Once the delay has elapsed the call is considered fired and ``cancel()``
    no longer interrupts it.
    """

    def __init__(self, query: str):
        self.query = query
        self.fired = False
        self.task: asyncio.Task | None = None

    @property
    def pending(self) -> bool:
        return self.task is not None and not self.fired and not self.task.done()

    def cancel(self) -> bool:
        """Cancel the call if it has not fired yet. Returns True if cancelled."""
        if not self.pending:
            return False
        self.task.cancel()
        return True

    async def wait(self) -> None:
        """Wait for the call to finish (or be cancelled)."""
        if self.task is None:
            return
        try:
            await asyncio.shield(self.task)
        except asyncio.CancelledError:
            if not self.task.cancelled():
                raise


class SearchDebouncer:
    """Holds at most one pending call; each ``schedule`` replaces the previous one."""

    def __init__(self, delay: float = DEFAULT_DELAY):
        self.delay = delay
        self._handle: DebounceHandle | None = None

    @property
    def handle(self) -> DebounceHandle | None:
        return self._handle

    def cancel(self) -> bool:
        if self._handle is None:
            return False
        return self._handle.cancel()

    def schedule(
        self, query: str, callback: Callable[[str], Awaitable[None]]
    ) -> DebounceHandle | None:
        """Cancel any pending call, then schedule ``callback(query)`` after the delay.

        Empty queries schedule nothing and return None. Must be called from
        within a running event loop.
        """
        self.cancel()
        if not query:
            self._handle = None
            return None

        handle = DebounceHandle(query)

        async def _run() -> None:
            await asyncio.sleep(self.delay)
            handle.fired = True
            logger.debug("Debounce fired for %r", query)
            await callback(query)

        handle.task = asyncio.get_running_loop().create_task(_run())
        self._handle = handle
        return handle
