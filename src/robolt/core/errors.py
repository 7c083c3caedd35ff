"""Taxonomía de errores del cliente.

Por qué una jerarquía cerrada:
- El pipeline solo puede fallar de tres formas (transporte, HTTP, decodificación);
  el llamador decide su propia política de reintentos con `except` específicos.
- Las subclases (`NotFoundError`, `UnrecognizedBadgeError`) refinan sin romper
  a quien captura la clase base.
"""

from __future__ import annotations


class RoboltError(Exception):
    """Base error for everything raised by robolt."""


class ConfigurationError(RoboltError):
    """Settings are missing or inconsistent (e.g. no session credential)."""


class ApiError(RoboltError):
    """Base error for a failed API call."""


class TransportError(ApiError):
    """The request never produced an HTTP response (DNS, connect, timeout)."""

    def __init__(self, cause: BaseException, *, url: str | None = None) -> None:
        self.cause = cause
        self.url = url
        target = f" for {url}" if url else ""
        super().__init__(f"transport failure{target}: {cause}")


class HttpError(ApiError):
    """The server answered with a status outside the 2xx range."""

    def __init__(self, status: int, body: str, *, url: str | None = None) -> None:
        self.status = status
        self.body = body
        self.url = url
        target = f" from {url}" if url else ""
        super().__init__(f"http status {status}{target}: {body[:200]}")


class NotFoundError(HttpError):
    """A single-record lookup answered 404."""


class DecodeError(ApiError):
    """A 2xx body did not match the expected shape."""

    def __init__(self, cause: BaseException | str, *, url: str | None = None) -> None:
        self.cause = cause
        self.url = url
        target = f" from {url}" if url else ""
        super().__init__(f"could not decode response{target}: {cause}")


class UnrecognizedBadgeError(DecodeError):
    """The server returned a platform badge name with no known mapping."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"unknown badge name {name!r}")
