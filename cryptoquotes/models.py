"""Shapes of the CoinMarketCap ``quotes/latest`` response body."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from cryptoquotes.errors import MissingQuoteError


class Quote(BaseModel):
    model_config = ConfigDict(frozen=True, strict=True, allow_inf_nan=False)

    price: float
    percent_change_7d: float
    volume_24h: float
    market_cap: float


class Currency(BaseModel):
    model_config = ConfigDict(frozen=True, strict=True, populate_by_name=True)

    id: int
    name: str
    symbol: str
    slug: str
    quotes: dict[str, Quote] = Field(alias="quote")

    def quote_in(self, quote_currency: str) -> Quote:
        try:
            return self.quotes[quote_currency]
        except KeyError:
            raise MissingQuoteError(self.symbol, quote_currency) from None


class QuotesResponse(BaseModel):
    model_config = ConfigDict(frozen=True, strict=True)

    data: dict[str, Currency]
