"""
Page metadata for extracted articles.

Reads title, byline, excerpt and site name from ``<meta>`` tags, JSON-LD
blocks and byline markup. JSON-LD takes precedence over meta tags, and
meta tags over markup. Missing values are empty strings.
"""

from __future__ import annotations

from dataclasses import dataclass
import json
import re
from typing import Any

from bs4 import BeautifulSoup, Tag

_TITLE_KEYS = (
    "dc:title",
    "dcterm:title",
    "og:title",
    "weibo:article:title",
    "weibo:webpage:title",
    "title",
    "twitter:title",
)
_BYLINE_KEYS = ("dc:creator", "dcterm:creator", "author", "parsely-author")
_EXCERPT_KEYS = (
    "dc:description",
    "dcterm:description",
    "og:description",
    "weibo:article:description",
    "weibo:webpage:description",
    "description",
    "twitter:description",
)
_SITE_NAME_KEYS = ("og:site_name",)

_ARTICLE_TYPES = re.compile(
    r"^(Article|AdvertiserContentArticle|NewsArticle|AnalysisNewsArticle|"
    r"AskPublicNewsArticle|BackgroundNewsArticle|OpinionNewsArticle|"
    r"ReportageNewsArticle|ReviewNewsArticle|Report|SatiricalArticle|"
    r"ScholarlyArticle|MedicalScholarlyArticle|SocialMediaPosting|"
    r"BlogPosting|LiveBlogPosting|DiscussionForumPosting|TechArticle|"
    r"APIReference)$"
)
_BYLINE_HINT = re.compile(r"byline|author|dateline|writtenby|p-author", re.IGNORECASE)
_MAX_BYLINE_CHARS = 100
_WHITESPACE_RE = re.compile(r"\s+")


@dataclass
class PageMetadata:
    """Metadata found in a page, each field empty when not present."""

    title: str = ""
    byline: str = ""
    excerpt: str = ""
    site_name: str = ""


def read_metadata(soup: BeautifulSoup) -> PageMetadata:
    """Collect article metadata from a parsed page.

    Args:
        soup: The parsed page; it is not modified

    Returns:
        PageMetadata with whatever the page declares
    """
    values = _meta_values(soup)
    ld = _json_ld(soup)

    return PageMetadata(
        title=ld.get("title") or _first(values, _TITLE_KEYS),
        byline=ld.get("byline") or _first(values, _BYLINE_KEYS) or _byline_from_markup(soup),
        excerpt=ld.get("excerpt") or _first(values, _EXCERPT_KEYS),
        site_name=ld.get("site_name") or _first(values, _SITE_NAME_KEYS),
    )


def document_title(soup: BeautifulSoup) -> str:
    """Return the text of the document's <title>, whitespace-normalized."""
    title = soup.find("title")
    if title is None:
        return ""
    return _clean(title.get_text())


def _meta_values(soup: BeautifulSoup) -> dict[str, str]:
    values: dict[str, str] = {}
    for meta in soup.find_all("meta"):
        content = meta.get("content")
        if not content:
            continue
        content = _clean(content)
        if not content:
            continue
        # property may hold several space-separated names (RDFa).
        for name in (meta.get("property") or "").split():
            values.setdefault(name.lower(), content)
        name = meta.get("name") or meta.get("itemprop")
        if name:
            values.setdefault(_clean(name).lower().replace(".", ":"), content)
    return values


def _first(values: dict[str, str], keys: tuple[str, ...]) -> str:
    for key in keys:
        if values.get(key):
            return values[key]
    return ""


def _json_ld(soup: BeautifulSoup) -> dict[str, str]:
    for script in soup.find_all("script", attrs={"type": "application/ld+json"}):
        raw = script.string or script.get_text()
        if not raw or not raw.strip():
            continue
        try:
            data = json.loads(raw.strip())
        except json.JSONDecodeError:
            continue
        node = _find_article_node(data)
        if node is not None:
            return _from_article_node(node)
    return {}


def _find_article_node(data: Any) -> dict[str, Any] | None:
    if isinstance(data, list):
        for item in data:
            node = _find_article_node(item)
            if node is not None:
                return node
        return None
    if not isinstance(data, dict):
        return None
    context = data.get("@context")
    if isinstance(context, str) and "schema.org" not in context:
        return None
    if "@graph" in data and "@type" not in data:
        return _find_article_node(data["@graph"])
    types = data.get("@type")
    if isinstance(types, str):
        types = [types]
    if isinstance(types, list) and any(isinstance(t, str) and _ARTICLE_TYPES.match(t) for t in types):
        return data
    return None


def _from_article_node(node: dict[str, Any]) -> dict[str, str]:
    result: dict[str, str] = {}
    title = node.get("headline") or node.get("name")
    if isinstance(title, str):
        result["title"] = _clean(title)

    authors = node.get("author")
    if isinstance(authors, dict):
        authors = [authors]
    if isinstance(authors, list):
        names = [
            _clean(a["name"])
            for a in authors
            if isinstance(a, dict) and isinstance(a.get("name"), str) and a["name"].strip()
        ]
        if names:
            result["byline"] = ", ".join(names)
    elif isinstance(authors, str):
        result["byline"] = _clean(authors)

    description = node.get("description")
    if isinstance(description, str):
        result["excerpt"] = _clean(description)

    publisher = node.get("publisher")
    if isinstance(publisher, dict) and isinstance(publisher.get("name"), str):
        result["site_name"] = _clean(publisher["name"])
    return {key: value for key, value in result.items() if value}


def _byline_from_markup(soup: BeautifulSoup) -> str:
    for el in soup.find_all(True):
        if not isinstance(el, Tag) or el.name in {"html", "head", "body", "meta", "script", "style"}:
            continue
        rel = _attr_text(el, "rel")
        itemprop = _attr_text(el, "itemprop")
        hints = _attr_text(el, "class") + " " + _attr_text(el, "id")
        if rel == "author" or "author" in itemprop.split() or _BYLINE_HINT.search(hints):
            text = _clean(el.get_text(" "))
            if text and len(text) < _MAX_BYLINE_CHARS:
                return text
    return ""


def _attr_text(el: Tag, name: str) -> str:
    value = el.get(name)
    if isinstance(value, list):
        return " ".join(value)
    return value or ""


def _clean(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", text).strip()
