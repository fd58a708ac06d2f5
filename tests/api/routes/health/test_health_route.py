"""Testes dos endpoints de health e readiness."""

from __future__ import annotations

import json

import pytest

from api.routes.health import router as health_router
from api.routes.health.router import health_check, readiness_check


@pytest.mark.asyncio
async def test_health_returns_healthy() -> None:
    response = await health_check()

    assert response.status == "healthy"
    assert response.service == "conversion-relay"
    assert response.timestamp


@pytest.mark.asyncio
async def test_readiness_returns_not_ready_with_config_errors(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setattr(
        health_router,
        "collect_settings_errors",
        lambda: ["tapfiliate: TAPFILIATE_API_KEY não configurado"],
    )

    response = await readiness_check()
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 503
    assert payload["status"] == "not_ready"
    assert payload["errors"] == ["tapfiliate: TAPFILIATE_API_KEY não configurado"]


@pytest.mark.asyncio
async def test_readiness_returns_ready_when_config_is_valid(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setattr(health_router, "collect_settings_errors", lambda: [])

    response = await readiness_check()
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 200
    assert payload["status"] == "ready"
    assert payload["errors"] == []
