"""
HTTP-facing adapters.

The standalone FastAPI server and the serverless function handler share
the request handling in handlers.handle_parse.
"""

from .function import handler
from .handlers import ParseResponse, cors_headers, handle_parse
from .server import create_app

__all__ = ["create_app", "handler", "handle_parse", "cors_headers", "ParseResponse"]
