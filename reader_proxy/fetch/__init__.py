"""
Page fetching and article extraction.

This package handles HTTP fetching, readable-content extraction,
page metadata and URL absolutizing.
"""

from .absolutize import absolutify, resolve_srcset, resolve_url
from .extractor import DEFAULT_CHAR_THRESHOLD, extract_from_html, select_main_element
from .fetcher import build_headers, fetch_page, validate_target_url
from .metadata import PageMetadata, read_metadata

__all__ = [
    "absolutify",
    "resolve_url",
    "resolve_srcset",
    "DEFAULT_CHAR_THRESHOLD",
    "extract_from_html",
    "select_main_element",
    "build_headers",
    "fetch_page",
    "validate_target_url",
    "PageMetadata",
    "read_metadata",
]
