from __future__ import annotations

import asyncio
import json

from starlette.requests import Request

from shapeguard import GuardRejectedError
from shapeguard_http.errors import (
    MalformedJSONError,
    guard_rejected_handler,
    malformed_json_handler,
    unhandled_exception_handler,
)


def _req(path: str) -> Request:
    return Request({"type": "http", "method": "POST", "path": path, "headers": []})


def test_guard_rejected_handler_returns_422() -> None:
    exc = GuardRejectedError(guard_name="string", value_type="int", context="body")
    resp = asyncio.run(guard_rejected_handler(_req("/items"), exc))
    assert resp.status_code == 422
    body = json.loads(resp.body)
    assert body["code"] == "INVALID_REQUEST"
    assert body["details"] == {"guard": "string", "type": "int"}
    assert body["error"] == "body: expected string, got value of type int"


def test_malformed_json_handler_returns_400() -> None:
    resp = asyncio.run(
        malformed_json_handler(_req("/items"), MalformedJSONError("bad json"))
    )
    assert resp.status_code == 400
    assert b"MALFORMED_JSON" in resp.body


def test_handlers_fall_back_to_unhandled_for_foreign_exceptions() -> None:
    r1 = asyncio.run(guard_rejected_handler(_req("/items"), RuntimeError("boom")))
    r2 = asyncio.run(malformed_json_handler(_req("/items"), RuntimeError("boom")))
    for resp in (r1, r2):
        assert resp.status_code == 500
        assert b"INTERNAL_ERROR" in resp.body


def test_unhandled_exception_handler() -> None:
    resp = asyncio.run(unhandled_exception_handler(_req("/x"), KeyError("k")))
    assert resp.status_code == 500
    assert json.loads(resp.body)["details"] == {"type": "KeyError"}
