"""
Standalone HTTP server for the reader proxy.

Exposes GET /api/parse?url=... and, when the configured static directory
exists, serves the pre-built reader UI at "/".
"""

from __future__ import annotations

import os
from pathlib import Path

import httpx
from fastapi import FastAPI, Query
from fastapi.responses import JSONResponse, Response
from fastapi.staticfiles import StaticFiles

from ..config import AppConfig, load_config
from ..logging_utils import get_logger, log_event
from .handlers import cors_headers, handle_parse

logger = get_logger("server")


class HtmlStaticFiles(StaticFiles):
    """Static files where `/about` also finds `about.html`."""

    def lookup_path(self, path: str) -> tuple[str, os.stat_result | None]:
        full_path, stat_result = super().lookup_path(path)
        if stat_result is None and not os.path.splitext(path)[1]:
            return super().lookup_path(path + ".html")
        return full_path, stat_result


def create_app(
    cfg: AppConfig | None = None,
    transport: httpx.BaseTransport | None = None,
) -> FastAPI:
    """Build the FastAPI application.

    Args:
        cfg: Application configuration; loaded from the environment if None
        transport: Optional httpx transport for outbound fetches (tests)
    """
    cfg = cfg or load_config()
    app = FastAPI(
        title="Reader Proxy",
        description="Fetches a web page and returns its readable article as JSON",
        version="0.1.0",
    )

    # Plain def: requests run on the thread pool, the fetch blocks.
    @app.get("/api/parse")
    def parse(url: str | None = Query(default=None)) -> JSONResponse:
        result = handle_parse(url, cfg, transport=transport)
        return JSONResponse(
            content=result.body,
            status_code=result.status_code,
            headers=cors_headers(cfg),
        )

    @app.options("/api/parse")
    def parse_preflight() -> Response:
        return Response(content=b"", status_code=200, headers=cors_headers(cfg))

    static_dir = cfg.server.static_dir
    if static_dir and Path(static_dir).is_dir():
        app.mount("/", HtmlStaticFiles(directory=static_dir, html=True), name="static")
        log_event(logger, "Serving static UI", event="static_mount", directory=static_dir)

    return app
