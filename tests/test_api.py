from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Annotated

import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

from shapeguard import array_of, literal, never, number, string, struct
from shapeguard_http.config import Settings
from shapeguard_http.dependencies import get_settings, guarded_body
from shapeguard_http.main import create_app, install_guard_handlers

ORDER = struct(
    {
        "sku": string,
        "quantity": number,
        "status": literal("open", "closed"),
        "tags": array_of(string),
    },
    required=["sku", "quantity", "status"],
    additional=never,
)

OrderBody = Annotated[dict[str, object], Depends(guarded_body(ORDER))]


def _settings(*, log_rejections: bool) -> Settings:
    return Settings(
        log_level="INFO",
        log_rejections=log_rejections,
        environment="test",
        http_timeout=1.0,
    )


def _build_app() -> FastAPI:
    app = install_guard_handlers(FastAPI())

    @app.post("/orders")
    async def create_order(order: OrderBody) -> dict[str, str]:
        return {"sku": str(order["sku"]), "status": str(order["status"])}

    return app


@pytest.fixture
def client() -> Iterator[TestClient]:
    app = _build_app()
    app.dependency_overrides[get_settings] = lambda: _settings(log_rejections=True)
    with TestClient(app) as c:
        yield c


def test_guarded_body_accepts_matching_payload(client: TestClient) -> None:
    payload = {"sku": "A-1", "quantity": 2, "status": "open", "tags": ["x"]}
    resp = client.post("/orders", json=payload)
    assert resp.status_code == 200
    assert resp.json() == {"sku": "A-1", "status": "open"}


def test_guarded_body_rejects_wrong_shape(
    client: TestClient, caplog: pytest.LogCaptureFixture
) -> None:
    payload = {"sku": "A-1", "quantity": "two", "status": "open"}
    with caplog.at_level(logging.WARNING):
        resp = client.post("/orders", json=payload)
    assert resp.status_code == 422
    data = resp.json()
    assert data["code"] == "INVALID_REQUEST"
    assert data["details"]["type"] == "dict"
    assert isinstance(data["timestamp"], str)
    assert any(r.getMessage() == "request body rejected" for r in caplog.records)


def test_guarded_body_rejects_extra_keys(client: TestClient) -> None:
    payload = {"sku": "A-1", "quantity": 1, "status": "closed", "note": "hi"}
    resp = client.post("/orders", json=payload)
    assert resp.status_code == 422


def test_guarded_body_rejects_malformed_json(client: TestClient) -> None:
    resp = client.post(
        "/orders", content=b"{not json", headers={"content-type": "application/json"}
    )
    assert resp.status_code == 400
    assert resp.json()["code"] == "MALFORMED_JSON"


def test_guarded_body_empty_body_is_malformed(client: TestClient) -> None:
    resp = client.post("/orders")
    assert resp.status_code == 400


def test_rejection_logging_can_be_disabled(caplog: pytest.LogCaptureFixture) -> None:
    app = _build_app()
    app.dependency_overrides[get_settings] = lambda: _settings(log_rejections=False)
    with TestClient(app) as c, caplog.at_level(logging.WARNING):
        resp = c.post("/orders", json=[])
    assert resp.status_code == 422
    assert not any(r.getMessage() == "request body rejected" for r in caplog.records)


def test_create_app_installs_handlers(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SHAPEGUARD_LOG_LEVEL", "WARNING")
    app = create_app(title="orders")
    assert app.title == "orders"
    assert app.exception_handlers
