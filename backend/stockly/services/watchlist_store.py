"""Durable watchlist — an ordered list of symbols kept under one key in SQLite."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from stockly.database import Base, create_engine_for, make_session_factory
from stockly.repositories.kv_repo import KeyValueRepository

logger = logging.getLogger(__name__)

WATCHLIST_KEY = "watchList"


class WatchlistStore:
    """Persisted watchlist with an in-memory copy for membership checks.

    Use ``await WatchlistStore.open(path)`` to create one and ``await
    store.close()`` when done. Entries are not deduplicated: adding a symbol
    twice stores it twice, while ``contains`` keeps answering True.
    """

    def __init__(
        self,
        engine: AsyncEngine,
        session_factory: async_sessionmaker[AsyncSession],
        key: str = WATCHLIST_KEY,
    ):
        self._engine = engine
        self._session_factory = session_factory
        self.key = key
        self._cache: list[str] = []
        self._lock = asyncio.Lock()

    @classmethod
    async def open(cls, storage_path: str | Path, key: str = WATCHLIST_KEY) -> WatchlistStore:
        engine = create_engine_for(storage_path)
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        store = cls(engine, make_session_factory(engine), key=key)
        await store.reload()
        logger.info("Opened watchlist store at %s (%d symbols)", storage_path, len(store._cache))
        return store

    async def close(self) -> None:
        await self._engine.dispose()

    async def _read(self) -> list[str]:
        async with self._session_factory() as db:
            row = await KeyValueRepository(db).get(self.key)
        if row is None or not isinstance(row.value, list):
            return []
        return [str(s) for s in row.value]

    async def reload(self) -> list[str]:
        """Re-read the persisted list into the in-memory copy."""
        async with self._lock:
            self._cache = await self._read()
            return list(self._cache)

    def list(self) -> list[str]:
        return list(self._cache)

    def contains(self, symbol: str) -> bool:
        return symbol in self._cache

    async def add(self, symbol: str) -> None:
        """Append ``symbol`` and write the whole list back."""
        async with self._lock:
            current = await self._read()
            updated = [*current, symbol]
            async with self._session_factory() as db:
                await KeyValueRepository(db).put(self.key, updated)
            self._cache = updated
        logger.info(f"Added {symbol} to watchlist ({len(updated)} entries)")
