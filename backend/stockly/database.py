"""Async SQLAlchemy plumbing for the local SQLite store."""

from pathlib import Path

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


def sqlite_url(path: str | Path) -> str:
    """Build an aiosqlite URL for a file path."""
    return f"sqlite+aiosqlite:///{path}"


def create_engine_for(path: str | Path) -> AsyncEngine:
    return create_async_engine(sqlite_url(path), echo=False)


def make_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
