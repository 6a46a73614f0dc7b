"""Presentation state for the watchlist client.

The controller owns the observable ``UIState`` and mediates between the
search debouncer, the market-data provider and the watchlist store. Every
mutation runs on the event loop; network completions resume there too, so
subscribers always see a consistent snapshot.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Callable

from stockly.schemas.quote import QuoteSnapshot
from stockly.schemas.state import UIState
from stockly.services.debouncer import DEFAULT_DELAY, SearchDebouncer
from stockly.services.market_data import MarketDataError, MarketDataProvider
from stockly.services.watchlist_store import WatchlistStore

logger = logging.getLogger(__name__)

StateListener = Callable[[UIState], None]


class WatchlistController:
    def __init__(
        self,
        provider: MarketDataProvider,
        store: WatchlistStore,
        *,
        debounce_delay: float = DEFAULT_DELAY,
    ):
        self.provider = provider
        self.store = store
        self.debouncer = SearchDebouncer(debounce_delay)
        self._state = UIState(watchlist=store.list())
        self._listeners: list[StateListener] = []
        # Bumped on every query edit; responses from older generations are dropped
        self._generation = 0
        self._in_flight: set[asyncio.Task] = set()

    # -- observable state ---------------------------------------------------

    @property
    def state(self) -> UIState:
        return self._state.model_copy(deep=True)

    @property
    def generation(self) -> int:
        return self._generation

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a listener called with a snapshot after every change."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _update(self, **changes) -> None:
        self._state = self._state.model_copy(update=changes)
        snapshot = self.state
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                logger.exception("State listener failed")

    # -- intents --------------------------------------------------------------

    def search(self, query: str, *, searching: bool = False) -> None:
        """Record the new query and (re)schedule the debounced search.

        An empty query schedules nothing; unless the search field is still
        focused (``searching``), prior results are cleared.
        """
        self._generation += 1
        self._update(query=query)
        handle = self.debouncer.schedule(query, self._run_search)
        if handle is None and not searching:
            self.clear()

    def clear(self) -> None:
        self._update(search_results=[])

    async def _run_search(self, query: str) -> None:
        generation = self._generation
        task = asyncio.current_task()
        if task is not None:
            self._in_flight.add(task)
        try:
            results = await self.provider.search_symbol(query)
        except MarketDataError as e:
            logger.exception(f"Search for {query!r} failed")
            if generation == self._generation:
                self._update(error=str(e))
            return
        finally:
            if task is not None:
                self._in_flight.discard(task)

        if generation != self._generation:
            logger.debug("Discarding stale results for %r", query)
            return
        self._update(search_results=results, error=None)

    async def add_to_watchlist(self, symbol: str) -> None:
        await self.store.add(symbol)
        self._update(watchlist=self.store.list())

    def is_in_watchlist(self, symbol: str) -> bool:
        return self.store.contains(symbol)

    async def fetch_price(self, symbol: str) -> QuoteSnapshot:
        """Fetch change and price for ``symbol`` and publish them in ``quotes``.

        Failures are logged, recorded in ``error`` and re-raised.
        """
        try:
            change, price = await self.provider.fetch_stock_price(symbol)
        except MarketDataError as e:
            logger.exception(f"Price fetch for {symbol} failed")
            self._update(error=str(e))
            raise

        snapshot = QuoteSnapshot(symbol=symbol, change=change, price=price)
        self._update(quotes={**self._state.quotes, symbol: snapshot}, error=None)
        return snapshot

    # -- lifecycle --------------------------------------------------------------

    async def wait_idle(self) -> None:
        """Wait until no debounced or in-flight search remains."""
        while True:
            handle = self.debouncer.handle
            if handle is not None and handle.task is not None and not handle.task.done():
                await handle.wait()
                continue
            if self._in_flight:
                await asyncio.gather(*self._in_flight, return_exceptions=True)
                continue
            return

    async def aclose(self) -> None:
        """Cancel the pending and in-flight searches and wait for them to unwind."""
        tasks = set(self._in_flight)
        handle = self.debouncer.handle
        if handle is not None and handle.task is not None:
            tasks.add(handle.task)
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        self._listeners.clear()
