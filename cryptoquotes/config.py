from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

from cryptoquotes.errors import ConfigError

API_KEY_ENV = "CMS_API_KEY"
DEFAULT_API_URL = "https://pro-api.coinmarketcap.com/v1/cryptocurrency/quotes/latest"


@dataclass(frozen=True)
class Settings:
    """Runtime settings for one export.

    Built by ``load_settings()`` rather than at import time, so the ``.env``
    file is loaded before any variable is read.
    """

    api_url: str = DEFAULT_API_URL
    api_key: str | None = None
    request_timeout_s: float | None = None
    quote_currency: str = "USD"
    output_csv_path: str = "out.csv"
    local_json_path: str | None = None
    logging_config_path: str = "logging.yaml"

    def require_api_key(self) -> str:
        if self.local_json_path:
            return self.api_key or ""
        if not self.api_key:
            raise ConfigError(f"{API_KEY_ENV} key not set")
        return self.api_key


def _parse_timeout(value: str | None) -> float | None:
    if value is None or value.strip() == "":
        return None
    try:
        return float(value)
    except ValueError as exc:
        raise ConfigError(f"CMC_TIMEOUT must be a number of seconds, got {value!r}") from exc


def load_settings() -> Settings:
    """Build settings from the process environment.

    A ``.env`` file in the working directory is loaded first; variables that
    are already set in the environment win over the file.
    """
    load_dotenv(find_dotenv(usecwd=True))
    return Settings(
        api_url=os.getenv("CMC_API_URL", DEFAULT_API_URL),
        api_key=os.getenv(API_KEY_ENV) or None,
        request_timeout_s=_parse_timeout(os.getenv("CMC_TIMEOUT")),
        quote_currency=os.getenv("CMC_QUOTE_CURRENCY", "USD").upper(),
        output_csv_path=os.getenv("CMC_OUTPUT_CSV", "out.csv"),
        local_json_path=os.getenv("CMC_LOCAL_JSON") or None,
        logging_config_path=os.getenv("CMC_LOGGING_CONFIG", "logging.yaml"),
    )
