"""Cliente tipado por estado de autenticación.

Por qué un parámetro de tipo y no un flag:
- `BaseClient[Anonymous]` y `BaseClient[Authenticated]` son el mismo objeto en
  runtime; la diferencia solo existe para el type checker.
- Las operaciones que requieren sesión se declaran con
  `self: <Api>[Authenticated]`, así mypy rechaza llamarlas sobre un cliente
  anónimo en vez de depender de un `if` en runtime que alguien puede olvidar.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from robolt.core.config import AppSettings, Endpoints
from robolt.core.interfaces.transport import Transport
from robolt.core.request import RequestBuilder


class AuthState:
    """Marcador de estado; nunca se instancia."""


class Anonymous(AuthState):
    """Cliente sin sesión: solo endpoints públicos."""


class Authenticated(AuthState):
    """Cliente con sesión verificada en construcción."""


S = TypeVar("S", bound=AuthState)
_C = TypeVar("_C", bound="BaseClient[Any]")


class BaseClient(Generic[S]):
    """Handle inmutable compartido por todos los builders.

    Solo el transporte mantiene estado mutable (pool de conexiones), y lo
    encapsula él mismo.
    """

    def __init__(self, transport: Transport, settings: AppSettings) -> None:
        self._transport = transport
        self._settings = settings

    @property
    def transport(self) -> Transport:
        return self._transport

    @property
    def settings(self) -> AppSettings:
        return self._settings

    @property
    def endpoints(self) -> Endpoints:
        return self._settings.endpoints

    def request_builder(self, url: str) -> RequestBuilder:
        return RequestBuilder(self, url)

    async def aclose(self) -> None:
        await self._transport.aclose()

    async def __aenter__(self: _C) -> _C:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
