from __future__ import annotations

from fastapi import FastAPI

from shapeguard import GuardRejectedError
from shapeguard_http.config import Settings
from shapeguard_http.errors import (
    MalformedJSONError,
    guard_rejected_handler,
    malformed_json_handler,
    unhandled_exception_handler,
)
from shapeguard_http.logging import setup_logging


def install_guard_handlers(app: FastAPI) -> FastAPI:
    """Register the error payload handlers for guarded request bodies."""
    app.add_exception_handler(GuardRejectedError, guard_rejected_handler)
    app.add_exception_handler(MalformedJSONError, malformed_json_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
    return app


def create_app(title: str = "shapeguard") -> FastAPI:
    settings = Settings.from_env()
    setup_logging(settings.log_level)
    return install_guard_handlers(FastAPI(title=title))
