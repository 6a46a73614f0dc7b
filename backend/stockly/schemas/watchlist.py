from pydantic import BaseModel, Field


class WatchlistAdd(BaseModel):
    symbol: str = Field(min_length=1, description="Ticker symbol to append to the watchlist")


class WatchlistMembership(BaseModel):
    symbol: str = Field(description="Ticker symbol that was checked")
    in_watchlist: bool = Field(description="Whether the symbol is currently in the watchlist")
