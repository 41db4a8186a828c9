from __future__ import annotations

import os

os.environ.setdefault("CMC_LOCAL_JSON", "data/sample/quotes_latest.sample.json")
os.environ.setdefault("CMC_OUTPUT_CSV", "data/sample/out.sample.csv")

from cryptoquotes.config import load_settings  # noqa: E402
from cryptoquotes.logging_setup import configure_logging  # noqa: E402
from cryptoquotes.services.pipeline import export_quotes  # noqa: E402


def main() -> None:
    settings = load_settings()
    configure_logging(settings.logging_config_path)

    output = export_quotes(["BTC", "ETH", "SHIB"], settings)
    print(f"OUTPUT: {output}")
    if output is None:
        return
    for line in output.read_text(encoding="utf-8").splitlines():
        print(line)


if __name__ == "__main__":
    main()
