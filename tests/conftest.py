"""Pytest configuration for dYdX client tests."""

import sys
from pathlib import Path

import httpx
import pytest

PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

pytest_plugins = ["pytest_asyncio"]

TEST_HOST = "https://api.test.dydx"

# Deterministic keys used across the suite (never funded).
API_PRIVATE_KEY = "0x3a1a1a1a1a1a1a1a1a1a1a1a1a1a1a1a1a1a1a1a1a1a1a1a1a1a1a1a1a1a1a1"
STARK_PRIVATE_KEY = "0x58c7d5a90b1776bde86ebac077e053ed85b0f7164f53b080304a531947d46e3"
ETH_PRIVATE_KEY = "0x4c0883a69102937d6231471b5dbb6204fe5129617082792ae468d01a3f362318"


class RecordingTransport:
    """Builds an ``httpx.MockTransport`` that records every request it serves."""

    def __init__(self, response_json=None, status_code: int = 200):
        self.requests = []
        self.response_json = {} if response_json is None else response_json
        self.status_code = status_code

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, json=self.response_json)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def host():
    return TEST_HOST


@pytest.fixture
def api_private_key():
    return API_PRIVATE_KEY


@pytest.fixture
def stark_private_key():
    return STARK_PRIVATE_KEY


@pytest.fixture
def eth_private_key():
    return ETH_PRIVATE_KEY
