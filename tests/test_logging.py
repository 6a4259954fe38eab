from __future__ import annotations

import json
import logging

from shapeguard_http.logging import StructuredFormatter, setup_logging


def test_setup_logging_adds_handler_and_is_idempotent() -> None:
    root = logging.getLogger()
    # Clear any existing handlers
    for h in list(root.handlers):
        root.removeHandler(h)

    setup_logging("DEBUG")
    assert any(isinstance(h, logging.StreamHandler) for h in root.handlers)
    count = len(root.handlers)

    # Calling again should not add duplicate handlers
    setup_logging("DEBUG")
    assert len(root.handlers) == count


def test_structured_formatter_includes_guard_context() -> None:
    record = logging.LogRecord(
        name="shapeguard_http.dependencies",
        level=logging.WARNING,
        pathname=__file__,
        lineno=10,
        msg="request body rejected",
        args=(),
        exc_info=None,
    )
    record.guard = "array_of(string)"
    record.path = "/items"

    data = json.loads(StructuredFormatter().format(record))

    assert data["level"] == "WARNING"
    assert data["message"] == "request body rejected"
    assert data["guard"] == "array_of(string)"
    assert data["path"] == "/items"
    assert "url" not in data
