from __future__ import annotations

import argparse
import sys
from typing import Iterable, Optional, Sequence

from cryptoquotes.config import load_settings
from cryptoquotes.errors import QuotesError
from cryptoquotes.logging_setup import configure_logging
from cryptoquotes.services.pipeline import export_quotes


def split_symbols(tokens: Iterable[str]) -> list[str]:
    symbols: list[str] = []
    for token in tokens:
        for part in token.split(","):
            part = part.strip()
            if part and part not in symbols:
                symbols.append(part)
    return symbols


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Gets prices of given cryptocurrencies")
    parser.add_argument(
        "--currencies",
        nargs="+",
        required=True,
        help="Ticker symbols, space or comma separated (e.g. BTC,ETH)",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    symbols = split_symbols(args.currencies)
    if not symbols:
        parser.error("--currencies needs at least one symbol")

    try:
        settings = load_settings()
        configure_logging(settings.logging_config_path)
        settings.require_api_key()
        output = export_quotes(symbols, settings)
    except (QuotesError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if output is not None:
        print(f"Wrote {output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
