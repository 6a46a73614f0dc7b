from pydantic import BaseModel, Field

from stockly.schemas.quote import QuoteSnapshot
from stockly.schemas.search import SearchResult


class UIState(BaseModel):
    """Observable state rendered by the client shell."""

    query: str = Field(default="", description="Current search field text")
    search_results: list[SearchResult] = Field(default_factory=list, description="Results of the latest completed search")
    watchlist: list[str] = Field(default_factory=list, description="Persisted watchlist symbols, in insertion order")
    quotes: dict[str, QuoteSnapshot] = Field(default_factory=dict, description="Last fetched quote per symbol")
    error: str | None = Field(default=None, description="Message of the last failed search or price fetch")


class QueryUpdate(BaseModel):
    query: str = Field(default="", description="New search field text")
    searching: bool = Field(
        default=False,
        description="True while the search field is focused; an empty query then keeps prior results",
    )
