from __future__ import annotations

from typing import Iterator, Sequence

import numpy as np
import pandas as pd

from cryptoquotes.models import Currency, QuotesResponse

OUTPUT_COLUMNS = ["name", "symbol", "price", "percent_change_7d"]


def format_decimal(value: float) -> str:
    """Shortest round-tripping decimal, positional notation, no trailing ``.0``."""
    return np.format_float_positional(float(value), trim="-")


def _ordered_currencies(response: QuotesResponse, requested: Sequence[str]) -> Iterator[Currency]:
    by_key = {key.upper(): key for key in response.data}
    emitted: set[str] = set()

    for symbol in requested:
        key = by_key.get(symbol.upper())
        if key is None or key in emitted:
            continue
        emitted.add(key)
        yield response.data[key]

    # Anything the API returned that was not asked for by name keeps response order.
    for key, currency in response.data.items():
        if key not in emitted:
            yield currency


def build_quote_table(
    response: QuotesResponse, requested: Sequence[str], quote_currency: str = "USD"
) -> pd.DataFrame:
    """One row per returned currency, requested symbols first in request order.

    Raises ``MissingQuoteError`` for the first currency without a
    ``quote_currency`` quote; no partial table is returned.
    """
    rows = []
    for currency in _ordered_currencies(response, requested):
        quote = currency.quote_in(quote_currency)
        rows.append(
            {
                "name": currency.name,
                "symbol": currency.symbol,
                "price": format_decimal(quote.price),
                "percent_change_7d": format_decimal(quote.percent_change_7d),
            }
        )

    return pd.DataFrame(rows, columns=OUTPUT_COLUMNS, dtype=object)
