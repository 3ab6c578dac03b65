"""
Request handling shared by the HTTP server and the function handler.

Both adapters turn a target URL into a status code and a JSON body
through handle_parse, so their behavior cannot diverge.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import httpx

from ..config import AppConfig
from ..exceptions import INTERNAL_ERROR_MESSAGE, MissingParameterError, ReaderProxyError
from ..logging_utils import get_logger, log_event
from ..runner import extract_article

logger = get_logger("api")

ALLOWED_METHODS = "GET, OPTIONS"


@dataclass
class ParseResponse:
    """Status code and JSON body of a parse request."""

    status_code: int
    body: dict[str, Any] = field(default_factory=dict)


def cors_headers(cfg: AppConfig) -> dict[str, str]:
    return {
        "Access-Control-Allow-Origin": cfg.server.allow_origin,
        "Access-Control-Allow-Methods": ALLOWED_METHODS,
    }


def handle_parse(
    target_url: str | None,
    cfg: AppConfig,
    transport: httpx.BaseTransport | None = None,
) -> ParseResponse:
    """Run the parse operation and map every outcome to a response.

    Known errors keep their status and user-facing message. Anything
    else is logged with its traceback and answered with a generic 500.
    """
    try:
        if not target_url:
            raise MissingParameterError()
        article = extract_article(target_url, cfg, transport=transport)
    except ReaderProxyError as exc:
        log_event(
            logger,
            "Parse rejected",
            event="parse_failed",
            url=target_url,
            status_code=exc.status_code,
            error=exc.message,
        )
        return ParseResponse(status_code=exc.status_code, body={"error": exc.message})
    except Exception:  # noqa: BLE001
        logger.exception("Parse failed", extra={"event": "parse_failed", "url": target_url})
        return ParseResponse(status_code=500, body={"error": INTERNAL_ERROR_MESSAGE})

    return ParseResponse(status_code=200, body=article.to_payload(target_url))
