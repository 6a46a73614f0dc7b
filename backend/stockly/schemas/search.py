from pydantic import AliasChoices, BaseModel, Field


class SearchResult(BaseModel):
    symbol: str = Field(description="Ticker symbol (e.g. AAPL)")
    exchange: str = Field(description="Exchange name (e.g. NASDAQ)")
    currency: str = Field(description="ISO 4217 currency code")
    # Upstream calls it instrument_name
    name: str = Field(
        validation_alias=AliasChoices("instrument_name", "name"),
        description="Instrument name (e.g. Apple Inc.)",
    )
    mic_code: str | None = Field(default=None, description="Market identifier code (e.g. XNGS)")
    instrument_type: str | None = Field(default=None, description="Instrument type (e.g. Common Stock)")
    country: str | None = Field(default=None, description="Country of listing")
    exchange_timezone: str | None = Field(default=None, description="IANA timezone of the exchange")

    model_config = {"frozen": True}


class SymbolSearchPayload(BaseModel):
    """Body of the upstream ``/symbol_search`` endpoint."""

    data: list[SearchResult]
