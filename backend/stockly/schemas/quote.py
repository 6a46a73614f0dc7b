from pydantic import BaseModel, Field


class QuoteChangePayload(BaseModel):
    """Body of the upstream ``/quote`` endpoint (only ``change`` is read)."""

    change: str | None = None


class PricePayload(BaseModel):
    """Body of the upstream ``/price`` endpoint."""

    price: str | None = None


class QuoteSnapshot(BaseModel):
    symbol: str = Field(description="Ticker symbol (e.g. AAPL)")
    change: str = Field(default="0", description="Absolute change since previous close, as reported upstream")
    price: str = Field(default="0", description="Latest real-time price, as reported upstream")
