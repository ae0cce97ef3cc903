"""
Pytest configuration and shared fixtures.

Provides:
- An in-memory storage backend installed for every test
- A deterministic clock for record timestamps
- FastAPI TestClient bound to the in-memory backend
- Bearer-token headers for two distinct callers
"""

from __future__ import annotations

from collections.abc import Generator
from typing import Dict

import pytest
from fastapi.testclient import TestClient

from wisewords_api.app.core import clock, storage
from wisewords_api.app.core.security import create_access_token
from wisewords_api.app.main import create_app

ADA = "ada-principal"
EVE = "eve-principal"


def auth_headers(principal: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token({'sub': principal})}"}


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture(autouse=True)
def backend() -> storage.InMemoryBackend:
    """Fresh in-memory storage for each test."""
    mem = storage.InMemoryBackend()
    storage.open_backend(mem)
    return mem


class FakeClock:
    """Clock returning 1, 2, 3, ... unless told otherwise."""

    def __init__(self) -> None:
        self.value = 0

    def set(self, value: int) -> None:
        self.value = value - 1

    def __call__(self) -> int:
        self.value += 1
        return self.value


@pytest.fixture(autouse=True)
def fake_clock(monkeypatch: pytest.MonkeyPatch) -> FakeClock:
    ticker = FakeClock()
    monkeypatch.setattr(clock, "now", ticker)
    return ticker


@pytest.fixture
def client(backend: storage.InMemoryBackend) -> Generator[TestClient, None, None]:
    with TestClient(create_app(backend=backend)) as test_client:
        yield test_client


@pytest.fixture
def ada_headers() -> Dict[str, str]:
    return auth_headers(ADA)


@pytest.fixture
def eve_headers() -> Dict[str, str]:
    return auth_headers(EVE)
