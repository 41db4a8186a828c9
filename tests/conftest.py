from __future__ import annotations

import json

import pytest

from cryptoquotes.services import cmc_client

ENV_VARS = (
    "CMS_API_KEY",
    "CMC_API_URL",
    "CMC_TIMEOUT",
    "CMC_QUOTE_CURRENCY",
    "CMC_OUTPUT_CSV",
    "CMC_LOCAL_JSON",
    "CMC_LOGGING_CONFIG",
)


def currency_payload(symbol: str, name: str, price: float, change_7d: float, quote_currency: str = "USD") -> dict:
    return {
        "id": abs(hash(symbol)) % 10_000,
        "name": name,
        "symbol": symbol,
        "slug": name.lower().replace(" ", "-"),
        "quote": {
            quote_currency: {
                "price": price,
                "percent_change_7d": change_7d,
                "volume_24h": 1,
                "market_cap": 1,
            }
        },
    }


class FakeResponse:
    def __init__(self, status_code: int, body) -> None:
        self.status_code = status_code
        self.text = body if isinstance(body, str) else json.dumps(body)


class FakeGet:
    """Stands in for ``requests.get`` and records every call."""

    def __init__(self, response=None, exc: Exception | None = None) -> None:
        self.response = response
        self.exc = exc
        self.calls: list[dict] = []

    def __call__(self, url, **kwargs):
        self.calls.append({"url": url, **kwargs})
        if self.exc is not None:
            raise self.exc
        return self.response


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture()
def fake_get(monkeypatch):
    def install(response=None, exc: Exception | None = None) -> FakeGet:
        fake = FakeGet(response=response, exc=exc)
        monkeypatch.setattr(cmc_client.requests, "get", fake)
        return fake

    return install
