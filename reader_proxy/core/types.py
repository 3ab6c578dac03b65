"""
Core data types for the reader proxy.

This module defines the data structures passed between pipeline stages:
- FetchResult: Raw HTML retrieved from the target site
- Article: Readable article extracted from that HTML
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class FetchResult:
    """Result of a successful HTTP fetch.

    Failures never produce a FetchResult; the fetcher raises FetchError
    instead. The result is consumed within one request and never cached.

    Attributes:
        url: The URL that was requested
        final_url: The URL of the final response after redirects
        status_code: HTTP status code of the final response
        text: The decoded response body
    """
    url: str
    final_url: str
    status_code: int
    text: str


@dataclass
class Article:
    """Readable article extracted from a web page.

    content is always a string, possibly empty. length is computed from
    text_content at extraction time and is not recomputed after the URL
    attributes in content are rewritten.

    Attributes:
        title: Best available title (extractor, document title, or URL)
        byline: Author attribution, empty if none was detected
        excerpt: Short summary, empty if none was detected
        length: Character count of the extracted plain text
        site_name: Detected site name, else the URL's host
        content: HTML fragment of the article body
        text_content: Plain text the length was derived from
    """
    title: str
    byline: str = ""
    excerpt: str = ""
    length: int = 0
    site_name: str = ""
    content: str = ""
    text_content: str = ""

    def to_payload(self, url: str) -> dict[str, Any]:
        """Serialize to the JSON body returned by the parse endpoint."""
        return {
            "url": url,
            "title": self.title,
            "byline": self.byline,
            "excerpt": self.excerpt,
            "length": self.length,
            "siteName": self.site_name,
            "content": self.content,
        }
