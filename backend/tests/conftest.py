"""Shared fixtures: fixed settings, an in-process app and a sleep recorder for backoff."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from main import create_app
from onboarding_proxy.core.config import Settings
from onboarding_proxy.core.deps import get_http_client

API_BASE = "https://backend.test"
UPSTREAM_URL = f"{API_BASE}/public/onboarding/start"
API_KEY = "sk_live_1234567890abcdef"


def make_settings(**overrides) -> Settings:
    values = {
        "MAYADESTEK_API_KEY": API_KEY,
        "MAYADESTEK_API_BASE": API_BASE,
        "VERCEL_GIT_COMMIT_SHA": None,
        "GIT_COMMIT_SHA": "abcdef0123456789",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def sleeps(monkeypatch: pytest.MonkeyPatch) -> list[float]:
    """Record backoff waits instead of sleeping."""
    recorded: list[float] = []
    real_sleep = asyncio.sleep

    async def fake_sleep(seconds: float, *args, **kwargs) -> None:
        if seconds:
            recorded.append(seconds)
        await real_sleep(0)

    monkeypatch.setattr(asyncio, "sleep", fake_sleep)
    return recorded


@pytest.fixture
async def http_client() -> AsyncIterator[httpx.AsyncClient]:
    async with httpx.AsyncClient() as client:
        yield client


@pytest.fixture
def app_factory(http_client: httpx.AsyncClient):
    def factory(settings: Settings):
        app = create_app(settings)
        app.dependency_overrides[get_http_client] = lambda: http_client
        return app

    return factory


@pytest.fixture
async def client(app_factory, settings: Settings) -> AsyncIterator[AsyncClient]:
    app = app_factory(settings)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
