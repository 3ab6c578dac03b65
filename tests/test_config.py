"""Tests for YAML configuration loading and environment overrides."""

from __future__ import annotations

import pytest

from reader_proxy.config import AppConfig, load_config


def test_defaults_without_file(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.delenv("READER_PROXY_CONFIG", raising=False)

    cfg = load_config(None)

    assert cfg == AppConfig()
    assert cfg.server.port == 3000
    assert cfg.extract.char_threshold == 500
    assert cfg.fetch.timeout_seconds == 20.0
    assert cfg.fetch.accept_language == "pt-BR,pt;q=0.9,en;q=0.8"


def test_yaml_merges_over_defaults(tmp_path, monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    path = tmp_path / "config.yaml"
    path.write_text(
        "fetch:\n"
        "  timeout_seconds: 5\n"
        "extract:\n"
        "  char_threshold: 200\n"
        "logging:\n"
        "  level: DEBUG\n"
        "  unknown_key: ignored\n"
        "unknown_section:\n"
        "  x: 1\n",
        encoding="utf-8",
    )

    cfg = load_config(str(path))

    assert cfg.fetch.timeout_seconds == 5
    assert cfg.fetch.user_agent == AppConfig().fetch.user_agent
    assert cfg.extract.char_threshold == 200
    assert cfg.logging.level == "DEBUG"
    assert cfg.server.port == 3000


def test_config_path_from_environment(tmp_path, monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    path = tmp_path / "env.yaml"
    path.write_text("server:\n  port: 8080\n", encoding="utf-8")
    monkeypatch.setenv("READER_PROXY_CONFIG", str(path))

    assert load_config().server.port == 8080


def test_port_environment_overrides_file(tmp_path, monkeypatch):
    path = tmp_path / "config.yaml"
    path.write_text("server:\n  port: 8080\n", encoding="utf-8")
    monkeypatch.setenv("PORT", "9000")

    assert load_config(str(path)).server.port == 9000


def test_invalid_port_environment(monkeypatch):
    monkeypatch.delenv("READER_PROXY_CONFIG", raising=False)
    monkeypatch.setenv("PORT", "http")

    with pytest.raises(ValueError):
        load_config(None)


def test_empty_yaml_file(tmp_path, monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")

    assert load_config(str(path)) == AppConfig()
