from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence

import requests
from pydantic import ValidationError

from cryptoquotes.config import Settings
from cryptoquotes.errors import FetchError, SchemaError
from cryptoquotes.models import QuotesResponse

logger = logging.getLogger(__name__)

API_KEY_HEADER = "X-CMC_PRO_API_KEY"


def _build_params(symbols: Sequence[str]) -> dict:
    return {"symbol": ",".join(symbols)}


def _build_headers(api_key: str) -> dict:
    return {
        "Accepts": "application/json",
        API_KEY_HEADER: api_key,
    }


def parse_response_body(text: str) -> QuotesResponse:
    try:
        return QuotesResponse.model_validate_json(text)
    except ValidationError as exc:
        raise SchemaError(f"Response body does not match the quotes schema:\n{exc}") from exc


def _read_local_file(path: str) -> str:
    return Path(path).read_text(encoding="utf-8")


def fetch_quotes(symbols: Sequence[str], settings: Settings) -> Optional[QuotesResponse]:
    """Fetch the latest quotes for ``symbols``.

    Returns ``None`` when the API answers with a non-200 status; the status
    and body are logged and nothing is parsed. Transport failures raise
    ``FetchError`` and malformed bodies raise ``SchemaError``.
    """
    if not symbols:
        raise ValueError("At least one symbol is required")

    if settings.local_json_path:
        logger.debug("Reading quotes from local file %s", settings.local_json_path)
        return parse_response_body(_read_local_file(settings.local_json_path))

    api_key = settings.require_api_key()
    logger.debug("Requesting %s for %s", settings.api_url, ",".join(symbols))
    try:
        resp = requests.get(
            settings.api_url,
            headers=_build_headers(api_key),
            params=_build_params(symbols),
            timeout=settings.request_timeout_s,
        )
    except requests.RequestException as exc:
        raise FetchError(f"Error while fetching data: {exc}") from exc

    if resp.status_code != requests.codes.ok:
        logger.info("Status: %s\nResponse Body: %s", resp.status_code, resp.text)
        return None

    return parse_response_body(resp.text)
