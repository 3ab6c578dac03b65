from __future__ import annotations

import httpx
import pytest

from reader_proxy.config import AppConfig

_LONG_PARAGRAPH = (
    "Reader mode keeps the article text, drops the navigation, and resolves every link "
    "against the page it came from, so the content can be shown anywhere. "
) * 6


def _article_page(title: str = "T", extra_head: str = "", body: str | None = None) -> str:
    if body is None:
        body = f'<article><p>{_LONG_PARAGRAPH}</p><img src="/x.png"></article>'
    return (
        f"<html><head><title>{title}</title>{extra_head}</head>"
        f"<body>{body}</body></html>"
    )


@pytest.fixture
def long_paragraph() -> str:
    return _LONG_PARAGRAPH


@pytest.fixture
def article_page():
    """Builder for a page whose <article> is long enough for readability."""
    return _article_page


@pytest.fixture
def cfg(monkeypatch) -> AppConfig:
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.delenv("READER_PROXY_CONFIG", raising=False)
    config = AppConfig()
    config.server.static_dir = None
    config.logging.console = False
    return config


@pytest.fixture
def site():
    """Routes (URL -> (status, html)) served through an httpx MockTransport.

    Unknown URLs answer 404.
    """
    routes: dict[str, tuple[int, str]] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        status, html = routes.get(str(request.url), (404, "not found"))
        return httpx.Response(status, text=html, headers={"Content-Type": "text/html; charset=utf-8"})

    return routes, httpx.MockTransport(handler)
