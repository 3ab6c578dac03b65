"""
Core domain models.

This package contains the data types shared by the fetch, extract
and API stages.
"""

from .types import Article, FetchResult

__all__ = ["Article", "FetchResult"]
