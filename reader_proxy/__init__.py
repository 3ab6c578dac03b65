"""
Reader Proxy - readable article extraction over HTTP.

This package fetches a web page, extracts its readable article content
(title, byline, excerpt, HTML and text) with a readability heuristic,
rewrites relative URLs to absolute ones and returns the result as JSON.

Main entry points are the CLI (`reader-proxy serve`, `reader-proxy parse`)
and the serverless handler `reader_proxy.api.function.handler`.

Example:
    $ reader-proxy serve --port 3000
    $ curl 'http://localhost:3000/api/parse?url=https://example.com/post'
"""

__all__ = ["__version__", "Article", "AppConfig", "load_config", "extract_article"]
__version__ = "0.1.0"

from .config import AppConfig, load_config
from .core.types import Article
from .runner import extract_article
