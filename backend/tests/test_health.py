"""Tests for the health endpoint."""

from __future__ import annotations

from httpx import ASGITransport, AsyncClient

from conftest import make_settings


async def test_healthz_reports_configuration(client: AsyncClient) -> None:
    response = await client.get("/healthz")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["build"] == "abcdef0"
    assert data["checks"] == {"api_key_configured": True, "api_base": "https://backend.test"}
    assert "sk_live" not in response.text


async def test_healthz_degraded_without_api_key(app_factory) -> None:
    app = app_factory(make_settings(MAYADESTEK_API_KEY=None))
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        response = await ac.get("/healthz")

    assert response.json()["status"] == "degraded"
    assert response.json()["checks"]["api_key_configured"] is False
