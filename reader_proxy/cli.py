"""
Command-line interface for the reader proxy.

Uses Typer to provide two commands:
- serve: run the HTTP server under uvicorn
- parse: extract one URL and print the JSON payload

Loads a .env file first, so PORT and READER_PROXY_CONFIG can live there.
"""

from __future__ import annotations

import json
from pathlib import Path

import typer
import uvicorn
from dotenv import load_dotenv
from rich.console import Console

from .api.handlers import handle_parse
from .api.server import create_app
from .config import AppConfig, load_config
from .logging_utils import log_event, setup_logging

app = typer.Typer(add_completion=False)
console = Console()


def _load(config: Path | None, log_level: str | None) -> AppConfig:
    load_dotenv()
    cfg = load_config(str(config) if config else None)
    if log_level:
        cfg.logging.level = log_level
    return cfg


@app.command()
def serve(
    host: str | None = typer.Option(None, "--host", help="Interface to bind."),
    port: int | None = typer.Option(None, "--port", "-p", help="Port (default: $PORT or 3000)."),
    config: Path | None = typer.Option(None, "--config", "-c", exists=True, readable=True),
    static_dir: Path | None = typer.Option(
        None, "--static-dir", help="Directory with the reader UI served at /."
    ),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
):
    """Run the HTTP server.

    Args:
        host: Interface to bind, overrides server.host
        port: Port to listen on, overrides server.port and $PORT
        config: Optional path to YAML config file
        static_dir: Reader UI directory, overrides server.static_dir
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    cfg = _load(config, log_level)
    if host:
        cfg.server.host = host
    if port is not None:
        cfg.server.port = port
    if static_dir is not None:
        cfg.server.static_dir = str(static_dir)

    logger = setup_logging(cfg.logging)
    log_event(
        logger,
        f"Reader server running at http://localhost:{cfg.server.port}",
        event="server_start",
        host=cfg.server.host,
        port=cfg.server.port,
    )
    uvicorn.run(create_app(cfg), host=cfg.server.host, port=cfg.server.port)


@app.command()
def parse(
    url: str = typer.Argument(..., help="Page to extract."),
    config: Path | None = typer.Option(None, "--config", "-c", exists=True, readable=True),
    content: bool = typer.Option(True, "--content/--no-content", help="Include the HTML content."),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
):
    """Extract the readable article of URL and print it as JSON."""
    cfg = _load(config, log_level or "WARNING")
    setup_logging(cfg.logging)

    result = handle_parse(url, cfg)
    if result.status_code != 200:
        console.print(f"[red]Error {result.status_code}:[/red] {result.body['error']}")
        raise typer.Exit(code=1)

    body = dict(result.body)
    if not content:
        body.pop("content", None)
    typer.echo(json.dumps(body, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    app()
