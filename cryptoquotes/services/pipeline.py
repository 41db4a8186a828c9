from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence

import pandas as pd

from cryptoquotes.config import Settings
from cryptoquotes.services.cmc_client import fetch_quotes
from cryptoquotes.services.transformer import build_quote_table

logger = logging.getLogger(__name__)


def write_quote_table(table: pd.DataFrame, path: str | Path) -> Path:
    output = Path(path)
    table.to_csv(output, index=False, encoding="utf-8", lineterminator="\n")
    return output


def export_quotes(symbols: Sequence[str], settings: Settings) -> Optional[Path]:
    """Fetch quotes for ``symbols`` and write them to ``settings.output_csv_path``.

    Returns the written path, or ``None`` when the API answered with a
    non-200 status and nothing was written.
    """
    logger.debug("Querying the following currencies: %s", list(symbols))

    response = fetch_quotes(symbols, settings)
    if response is None:
        return None

    # Built in full before the file is touched so a bad row leaves no partial CSV.
    table = build_quote_table(response, symbols, quote_currency=settings.quote_currency)
    output = write_quote_table(table, settings.output_csv_path)

    logger.info("Queried %s and wrote %d rows to %s", ",".join(symbols), len(table), output)
    return output
