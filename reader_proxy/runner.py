"""
Core parse operation for the reader proxy.

This module coordinates one request:
1. Fetch the target page
2. Extract the readable article
3. Rewrite URL attributes in the article content to absolute URLs

Each call is independent; nothing is cached between calls.
"""

from __future__ import annotations

from dataclasses import replace

import httpx

from .config import AppConfig
from .core.types import Article
from .fetch.absolutize import absolutify
from .fetch.extractor import extract_from_html
from .fetch.fetcher import fetch_page
from .logging_utils import get_logger, log_event

logger = get_logger("runner")


def extract_article(
    url: str,
    cfg: AppConfig,
    transport: httpx.BaseTransport | None = None,
) -> Article:
    """Fetch url and return its readable article.

    Relative links are resolved against the URL the page was finally
    served from, after redirects. The title and site name fallbacks use
    the requested url.

    Args:
        url: The target page URL
        cfg: Application configuration
        transport: Optional httpx transport passed to the fetcher

    Returns:
        Article with absolutized content

    Raises:
        InvalidUrlError: If url is not an absolute http(s) URL
        FetchError: If the page could not be fetched
    """
    fetched = fetch_page(url, cfg.fetch, transport=transport)
    article = extract_from_html(
        fetched.text,
        fetched.final_url,
        char_threshold=cfg.extract.char_threshold,
        page_url=fetched.url,
    )
    article = replace(article, content=absolutify(article.content, fetched.final_url))
    log_event(
        logger,
        "Parse done",
        event="parse_ok",
        url=url,
        final_url=fetched.final_url,
        length=article.length,
    )
    return article
