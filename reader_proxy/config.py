"""
Configuration management using YAML files and dataclasses.

This module defines all configuration dataclasses and provides loading
from YAML files with defaults. Configuration sections:
- FetchConfig: HTTP fetching settings and request identity
- ExtractConfig: Readability extraction settings
- ServerConfig: HTTP server settings
- LoggingConfig: Logging behavior
- AppConfig: Root configuration container

Environment variables:
- READER_PROXY_CONFIG: path of a YAML file used when no path is given
- PORT: overrides server.port
"""

from __future__ import annotations

from dataclasses import dataclass, field
import os
from typing import Any

import yaml


@dataclass
class FetchConfig:
    """Configuration for fetching the target page.

    The request identity (user_agent, accept, accept_language) mimics a
    desktop browser; some sites serve degraded pages or block generic
    clients.

    Attributes:
        timeout_seconds: Upper bound for the whole request, redirects included
        trust_env: Whether to respect system proxy settings
        user_agent: HTTP User-Agent header string
        accept: HTTP Accept header string
        accept_language: HTTP Accept-Language header string
    """

    timeout_seconds: float = 20.0
    trust_env: bool = True
    user_agent: str = (
        "Mozilla/5.0 (X11; Linux x86_64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/119 Safari/537.36"
    )
    accept: str = "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8"
    accept_language: str = "pt-BR,pt;q=0.9,en;q=0.8"


@dataclass
class ExtractConfig:
    """Configuration for article extraction.

    Attributes:
        char_threshold: Minimum characters of extracted text for the
            readability result to count as the article
    """

    char_threshold: int = 500


@dataclass
class ServerConfig:
    """Configuration for the HTTP server.

    Attributes:
        host: Interface to bind
        port: Port to listen on (PORT env var overrides it)
        static_dir: Directory served at "/" when it exists
        allow_origin: Value of Access-Control-Allow-Origin
    """

    host: str = "0.0.0.0"
    port: int = 3000
    static_dir: str | None = "public"
    allow_origin: str = "*"


@dataclass
class LoggingConfig:
    """Configuration for logging behavior.

    Attributes:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR")
        console: Whether to log to console
        file: Whether to log to file
        format: Log file format ("jsonl" or "plain")
        filename: Name of the log file
        log_dir: Directory for the log file; file logging is skipped when unset
    """

    level: str = "INFO"
    console: bool = True
    file: bool = False
    format: str = "jsonl"
    filename: str = "reader-proxy.jsonl"
    log_dir: str | None = None


@dataclass
class AppConfig:
    """Root configuration container aggregating all config sections."""

    fetch: FetchConfig = field(default_factory=FetchConfig)
    extract: ExtractConfig = field(default_factory=ExtractConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def default_config() -> AppConfig:
    """Return a fresh AppConfig with every section at its defaults."""
    return AppConfig()


def load_config(path: str | None = None) -> AppConfig:
    """Load configuration from a YAML file with defaults.

    Falls back to READER_PROXY_CONFIG when no path is given, then applies
    environment overrides.
    """
    path = path or os.getenv("READER_PROXY_CONFIG")
    if not path:
        return apply_env_overrides(default_config())

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    return apply_env_overrides(_merge_config(default_config(), raw))


def apply_env_overrides(cfg: AppConfig) -> AppConfig:
    """Apply PORT from the environment, as hosting platforms set it."""
    port = os.getenv("PORT")
    if port:
        try:
            cfg.server.port = int(port)
        except ValueError:
            raise ValueError(f"PORT must be an integer, got {port!r}") from None
    return cfg


def _merge_config(base: AppConfig, raw: dict[str, Any]) -> AppConfig:
    """Merge raw YAML config into base AppConfig."""
    data = _asdict(base)
    for key, value in raw.items():
        if key not in data:
            continue
        if isinstance(value, dict) and isinstance(data[key], dict):
            data[key].update({k: v for k, v in value.items() if k in data[key]})
        else:
            data[key] = value
    return _fromdict(data)


def _asdict(cfg: AppConfig) -> dict[str, Any]:
    """Convert AppConfig to nested dictionary."""
    return {
        "fetch": {
            "timeout_seconds": cfg.fetch.timeout_seconds,
            "trust_env": cfg.fetch.trust_env,
            "user_agent": cfg.fetch.user_agent,
            "accept": cfg.fetch.accept,
            "accept_language": cfg.fetch.accept_language,
        },
        "extract": {
            "char_threshold": cfg.extract.char_threshold,
        },
        "server": {
            "host": cfg.server.host,
            "port": cfg.server.port,
            "static_dir": cfg.server.static_dir,
            "allow_origin": cfg.server.allow_origin,
        },
        "logging": {
            "level": cfg.logging.level,
            "console": cfg.logging.console,
            "file": cfg.logging.file,
            "format": cfg.logging.format,
            "filename": cfg.logging.filename,
            "log_dir": cfg.logging.log_dir,
        },
    }


def _fromdict(data: dict[str, Any]) -> AppConfig:
    """Reconstruct AppConfig from nested dictionary."""
    return AppConfig(
        fetch=FetchConfig(**data["fetch"]),
        extract=ExtractConfig(**data["extract"]),
        server=ServerConfig(**data["server"]),
        logging=LoggingConfig(**data["logging"]),
    )
