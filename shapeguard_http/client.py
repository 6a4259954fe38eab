from __future__ import annotations

import json
import logging
from typing import TypeVar

import httpx

from shapeguard import Guard, GuardRejectedError, expect
from shapeguard_http.config import Settings
from shapeguard_http.errors import MalformedJSONError
from shapeguard_http.logging import get_logger

T = TypeVar("T")


def fetch_json(
    client: httpx.Client,
    url: str,
    guard: Guard[T],
    *,
    settings: Settings | None = None,
    logger: logging.Logger | None = None,
) -> T:
    """GET ``url`` and return its JSON body narrowed by ``guard``.

    HTTP error statuses raise ``httpx.HTTPStatusError``; an undecodable body
    raises ``MalformedJSONError``; a body of the wrong shape raises
    ``GuardRejectedError``.
    """
    cfg = settings or Settings.from_env()
    resp = client.get(url, timeout=cfg.http_timeout)
    resp.raise_for_status()
    return _checked_payload(resp, url, guard, cfg, logger or get_logger(__name__))


async def afetch_json(
    client: httpx.AsyncClient,
    url: str,
    guard: Guard[T],
    *,
    settings: Settings | None = None,
    logger: logging.Logger | None = None,
) -> T:
    """Async variant of ``fetch_json``."""
    cfg = settings or Settings.from_env()
    resp = await client.get(url, timeout=cfg.http_timeout)
    resp.raise_for_status()
    return _checked_payload(resp, url, guard, cfg, logger or get_logger(__name__))


def _checked_payload(
    resp: httpx.Response,
    url: str,
    guard: Guard[T],
    settings: Settings,
    logger: logging.Logger,
) -> T:
    try:
        payload: object = json.loads(resp.text)
    except json.JSONDecodeError as exc:
        logger.error(
            "response body is not JSON",
            extra={"url": url, "status": resp.status_code},
        )
        raise MalformedJSONError(f"response from {url} is not valid JSON") from exc
    try:
        return expect(guard, payload, context=url)
    except GuardRejectedError:
        if settings.log_rejections:
            logger.warning(
                "response body rejected",
                extra={"guard": guard.name, "url": url, "status": resp.status_code},
            )
        raise
