"""
Readable article extraction with a structural fallback.

This module provides the extraction chain:
1. readability: Mozilla's readability algorithm (readability-lxml)
2. structural: first <article>, <main> or [role=main] element, else <body>

The readability result only counts when its plain text reaches the
character threshold. Otherwise the structural fallback is used; a
degraded extraction is logged and never raised.
"""

from __future__ import annotations

from urllib.parse import urlparse

from bs4 import BeautifulSoup, Tag
from readability import Document

from ..core.types import Article
from ..logging_utils import get_logger, log_event
from .metadata import PageMetadata, document_title, read_metadata

DEFAULT_CHAR_THRESHOLD = 500

# Priority order, not document order.
FALLBACK_SELECTORS = ("article", "main", '[role="main"]')

logger = get_logger("extract")


def extract_from_html(
    html: str,
    base_url: str,
    char_threshold: int = DEFAULT_CHAR_THRESHOLD,
    page_url: str | None = None,
) -> Article:
    """Extract the readable article from a page.

    Args:
        html: The page HTML; malformed markup is accepted
        base_url: The URL the page was served from
        char_threshold: Minimum plain-text length for the readability result
        page_url: The URL that was asked for, used as last-resort title and
            for the site name; defaults to base_url

    Returns:
        Article whose content is an HTML fragment (URLs not yet absolutized)
    """
    soup = BeautifulSoup(html or "", "lxml")
    doc_title = document_title(soup)
    page_url = page_url or base_url
    hostname = urlparse(page_url).hostname or ""

    article = _extract_readability(html, base_url, char_threshold, read_metadata(soup))
    if article is None:
        log_event(
            logger,
            "Readability found no article, using structural fallback",
            event="extraction_fallback",
            url=base_url,
        )
        article = _extract_structural(soup, page_url, doc_title, hostname)

    return Article(
        title=article.title or doc_title or page_url,
        byline=article.byline or "",
        excerpt=article.excerpt or "",
        length=article.length or len(article.text_content),
        site_name=article.site_name or hostname,
        content=article.content or "",
        text_content=article.text_content or "",
    )


def select_main_element(soup: BeautifulSoup) -> Tag | BeautifulSoup:
    """Return the element holding the main content of a page.

    The first <article> wins over any <main>, which wins over any
    [role=main] element; the body (or the whole document) is the last
    resort.
    """
    for selector in FALLBACK_SELECTORS:
        el = soup.select_one(selector)
        if el is not None:
            return el
    return soup.body or soup


def _extract_readability(
    html: str,
    base_url: str,
    char_threshold: int,
    metadata: PageMetadata,
) -> Article | None:
    """Run readability and build an Article from its summary.

    Returns:
        Article, or None when readability fails or its text is shorter
        than char_threshold
    """
    if not html or not html.strip():
        return None

    try:
        # No url=: readability would rewrite or drop malformed links.
        doc = Document(html, retry_length=char_threshold)
        content = doc.summary(html_partial=True)
        short_title = doc.short_title()
    except Exception as exc:  # noqa: BLE001
        log_event(
            logger,
            "Readability failed",
            event="readability_error",
            url=base_url,
            error=f"{type(exc).__name__}: {exc}",
        )
        return None

    content_soup = BeautifulSoup(content or "", "html.parser")
    text = content_soup.get_text()
    if len(text.strip()) < char_threshold:
        return None

    return Article(
        title=metadata.title or short_title or "",
        byline=metadata.byline,
        excerpt=metadata.excerpt or _first_paragraph(content_soup),
        length=len(text),
        site_name=metadata.site_name,
        content=content,
        text_content=text,
    )


def _extract_structural(
    soup: BeautifulSoup,
    page_url: str,
    doc_title: str,
    hostname: str,
) -> Article:
    main = select_main_element(soup)
    text = main.get_text()
    return Article(
        title=doc_title or page_url,
        byline="",
        excerpt="",
        length=len(text),
        site_name=hostname,
        content=main.decode_contents(),
        text_content=text,
    )


def _first_paragraph(content_soup: BeautifulSoup) -> str:
    for p in content_soup.find_all("p"):
        text = p.get_text().strip()
        if text:
            return text
    return ""
