from __future__ import annotations


class QuotesError(Exception):
    """Base class for every failure that aborts a quotes export."""


class ConfigError(QuotesError):
    pass


class FetchError(QuotesError):
    pass


class SchemaError(QuotesError):
    pass


class MissingQuoteError(QuotesError):
    def __init__(self, symbol: str, quote_currency: str) -> None:
        super().__init__(f"{symbol} has no {quote_currency} quote in the response")
        self.symbol = symbol
        self.quote_currency = quote_currency
