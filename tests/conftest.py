"""
Shared test fixtures for quoter tests.

Provides a fake ``requests.get`` (no network) and a clean environment so
QuoteConfig.load() does not pick up a developer's .env or shell settings.
"""
import json
import sys
from pathlib import Path
from typing import Optional

import pytest
import requests

# Ensure project root is on path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

QUOTER_ENV = [
    "QUOTER_LANGUAGE",
    "QUOTER_PROVIDER",
    "QUOTER_WRAP_WIDTH",
    "QUOTER_ASCII_QUOTATION",
    "QUOTER_NO_COLORS",
    "QUOTER_JSON",
    "QUOTER_TIMEOUT_S",
    "QUOTER_FORISMATIC_URL",
    "QUOTER_HAPESIRE_URL",
    "QUOTER_DEBUG",
    "NO_COLOR",
]


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, content: bytes, status_code: int = 200):
        self.content = content
        self.status_code = status_code

    def raise_for_status(self):
        if not 200 <= self.status_code < 300:
            raise requests.HTTPError(f"{self.status_code} Server Error", response=self)


class FakeGet:
    """Records calls and returns a canned response or raises an exception."""

    def __init__(self):
        self.calls = []
        self.response: Optional[FakeResponse] = None
        self.exc: Optional[Exception] = None

    def reply_json(self, data, status_code: int = 200):
        self.response = FakeResponse(json.dumps(data).encode("utf-8"), status_code)

    def reply_raw(self, content: bytes, status_code: int = 200):
        self.response = FakeResponse(content, status_code)

    def fail(self, exc: Exception):
        self.exc = exc

    def __call__(self, url, params=None, timeout=None, **kwargs):
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        if self.exc is not None:
            raise self.exc
        return self.response


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Strip QUOTER_* settings and run from an empty dir (no .env)."""
    for name in QUOTER_ENV:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("quoter.config.load_dotenv", lambda override=False: False)


@pytest.fixture
def fake_get(monkeypatch):
    fake = FakeGet()
    monkeypatch.setattr("quoter.sources.requests.get", fake)
    return fake
