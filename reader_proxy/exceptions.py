"""
Error types for the reader proxy.

Request-level errors carry the HTTP status and the user-facing message
the API adapters put in the JSON ``error`` field. UrlResolutionError is
raised per attribute by the absolutizer and never leaves it.
"""

from __future__ import annotations

MISSING_URL_MESSAGE = "Parâmetro ?url é obrigatório"
INVALID_URL_MESSAGE = "Parâmetro ?url inválido"
INTERNAL_ERROR_MESSAGE = "Erro interno ao processar a página."


class ReaderProxyError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class MissingParameterError(ReaderProxyError):
    """The caller did not supply a target URL."""

    status_code = 400

    def __init__(self, message: str = MISSING_URL_MESSAGE):
        super().__init__(message)


class InvalidUrlError(ReaderProxyError):
    """The target URL is not an absolute http(s) URL."""

    status_code = 400

    def __init__(self, message: str = INVALID_URL_MESSAGE):
        super().__init__(message)


class FetchError(ReaderProxyError):
    """The upstream site was unreachable or answered with a non-success status.

    upstream_status is None for transport failures (DNS, refused
    connection, timeout); the response then uses 502.
    """

    status_code = 502

    def __init__(self, upstream_status: int | None = None, detail: str | None = None):
        if upstream_status is not None:
            message = f"Falha ao buscar URL ({upstream_status})"
        else:
            message = "Falha ao buscar URL"
        super().__init__(message, status_code=upstream_status)
        self.upstream_status = upstream_status
        self.detail = detail


class UrlResolutionError(ValueError):
    """A URL attribute value could not be resolved against the base URL."""
