from __future__ import annotations

import json
import logging
from collections.abc import Awaitable, Callable
from typing import Annotated, TypeVar

from fastapi import Depends, Request

from shapeguard import Guard, GuardRejectedError, expect
from shapeguard.guard import require_guard
from shapeguard_http.config import Settings
from shapeguard_http.errors import MalformedJSONError
from shapeguard_http.logging import get_logger

T = TypeVar("T")


def get_settings() -> Settings:
    """Dependency: typed boundary settings from environment."""
    return Settings.from_env()


def get_request_logger() -> logging.Logger:
    """Dependency: request-scoped logger (delegates to global logger)."""
    return get_logger(__name__)


SettingsDep = Annotated[Settings, Depends(get_settings)]
LoggerDep = Annotated[logging.Logger, Depends(get_request_logger)]


def guarded_body(guard: Guard[T]) -> Callable[..., Awaitable[T]]:
    """Build a dependency that returns the JSON request body narrowed by ``guard``.

    Undecodable bodies raise ``MalformedJSONError`` and rejected shapes raise
    ``GuardRejectedError``; both are mapped to error payloads by the handlers
    installed with ``install_guard_handlers``.
    """
    require_guard(guard, "guarded_body()")

    async def _guarded_body(
        request: Request, settings: SettingsDep, logger: LoggerDep
    ) -> T:
        raw = await request.body()
        try:
            payload: object = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise MalformedJSONError("request body is not valid JSON") from exc
        try:
            return expect(guard, payload, context="request body")
        except GuardRejectedError:
            if settings.log_rejections:
                logger.warning(
                    "request body rejected",
                    extra={"guard": guard.name, "path": request.url.path},
                )
            raise

    return _guarded_body
