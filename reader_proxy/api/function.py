"""
Serverless function adapter for the reader proxy.

The handler takes a function-platform event (``httpMethod``, ``rawUrl``
and optionally ``queryStringParameters``) and returns a response dict
with ``statusCode``, ``headers`` and a JSON ``body`` string.
"""

from __future__ import annotations

import json
from typing import Any
from urllib.parse import parse_qs, urlsplit

import httpx

from ..config import AppConfig, load_config
from ..logging_utils import get_logger, setup_logging
from .handlers import cors_headers, handle_parse


def target_url_from_event(event: dict[str, Any]) -> str | None:
    """Return the ``url`` query parameter of an event, if any.

    The full request URL wins; the pre-parsed query parameters are used
    when it is absent.
    """
    raw_url = event.get("rawUrl")
    if raw_url:
        values = parse_qs(urlsplit(raw_url).query).get("url")
        return values[0] if values else None
    params = event.get("queryStringParameters") or {}
    return params.get("url")


def handler(
    event: dict[str, Any],
    context: Any = None,
    cfg: AppConfig | None = None,
    transport: httpx.BaseTransport | None = None,
) -> dict[str, Any]:
    """Handle one function invocation for /api/parse.

    Logging is configured on the first invocation of a warm instance.

    Args:
        event: Platform event with httpMethod, rawUrl and queryStringParameters
        context: Platform context, unused
        cfg: Application configuration; loaded from the environment if None
        transport: Optional httpx transport for outbound fetches (tests)

    Returns:
        Dict with statusCode, headers and a JSON body string
    """
    cfg = cfg or load_config()
    if not get_logger().handlers:
        setup_logging(cfg.logging)
    headers = cors_headers(cfg)

    if (event.get("httpMethod") or "GET").upper() == "OPTIONS":
        return {"statusCode": 200, "headers": headers, "body": ""}

    result = handle_parse(target_url_from_event(event), cfg, transport=transport)
    return {
        "statusCode": result.status_code,
        "headers": {**headers, "Content-Type": "application/json"},
        "body": json.dumps(result.body, ensure_ascii=False),
    }
