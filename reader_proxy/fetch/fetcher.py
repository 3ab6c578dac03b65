"""
HTTP page fetching for the reader proxy.

Pages are fetched with a synchronous httpx client that follows redirects
and sends a fixed browser-like request identity. A single attempt is
made; every failure is raised as FetchError.
"""

from __future__ import annotations

from urllib.parse import urlparse

import httpx

from ..config import FetchConfig
from ..core.types import FetchResult
from ..exceptions import FetchError, InvalidUrlError
from ..logging_utils import get_logger, log_event

logger = get_logger("fetch")


def build_headers(cfg: FetchConfig) -> dict[str, str]:
    """Return the request identity headers sent with every fetch."""
    return {
        "User-Agent": cfg.user_agent,
        "Accept": cfg.accept,
        "Accept-Language": cfg.accept_language,
    }


def validate_target_url(url: str) -> str:
    """Check that url is an absolute http(s) URL and return it stripped.

    Raises:
        InvalidUrlError: If the scheme is not http/https or the host is missing
    """
    candidate = (url or "").strip()
    try:
        parsed = urlparse(candidate)
        hostname = parsed.hostname
    except ValueError:
        raise InvalidUrlError() from None
    if parsed.scheme.lower() not in {"http", "https"} or not hostname:
        raise InvalidUrlError()
    return candidate


def fetch_page(
    url: str,
    cfg: FetchConfig,
    transport: httpx.BaseTransport | None = None,
) -> FetchResult:
    """Fetch a page and return its HTML.

    Redirects are followed transparently; final_url is the URL of the
    last response and serves as the base for relative links.

    Args:
        url: The URL to fetch
        cfg: Fetch configuration (timeout, proxy handling, request identity)
        transport: Optional httpx transport, used to stub the network in tests

    Returns:
        FetchResult for a 2xx response

    Raises:
        InvalidUrlError: If url is not an absolute http(s) URL
        FetchError: On a non-success status (upstream_status set) or a
            transport failure such as DNS, refused connection or timeout
            (upstream_status None)
    """
    url = validate_target_url(url)
    log_event(logger, "Fetch start", event="fetch_start", url=url)

    try:
        with httpx.Client(
            timeout=cfg.timeout_seconds,
            headers=build_headers(cfg),
            follow_redirects=True,
            trust_env=cfg.trust_env,
            transport=transport,
        ) as client:
            resp = client.get(url)
            text = resp.text
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        detail = f"{type(exc).__name__}: {exc}"
        log_event(logger, "Fetch failed", event="fetch_failed", url=url, error=detail)
        raise FetchError(detail=detail) from exc

    if not resp.is_success:
        log_event(
            logger,
            "Fetch failed",
            event="fetch_failed",
            url=url,
            status_code=resp.status_code,
        )
        raise FetchError(upstream_status=resp.status_code)

    final_url = str(resp.url)
    log_event(
        logger,
        "Fetch done",
        event="fetch_done",
        url=url,
        final_url=final_url,
        status_code=resp.status_code,
        bytes=len(resp.content),
    )
    return FetchResult(url=url, final_url=final_url, status_code=resp.status_code, text=text)
