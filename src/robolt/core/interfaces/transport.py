"""Contrato del transporte HTTP.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- El pipeline depende solo de `send`/`aclose`; httpx (u otro stub en tests)
  queda en la capa de adaptadores.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from robolt.core.request import HttpRequest


@dataclass(frozen=True)
class TransportResponse:
    """Status code and raw body bytes of a completed exchange."""

    status_code: int
    content: bytes = b""

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")


class Transport(Protocol):
    """Contrato mínimo para ejecutar una petición.

    Reglas de diseño:
    - `send` es asíncrono y devuelve cualquier status (2xx o no).
    - Fallos sin respuesta (DNS, conexión, timeout) se elevan como
      `robolt.core.errors.TransportError`.
    """

    async def send(self, request: HttpRequest) -> TransportResponse:
        ...

    async def aclose(self) -> None:
        """Libera recursos (pool de conexiones). Puede ser no-op."""

        ...
