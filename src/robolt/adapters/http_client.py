"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts, headers y la cookie de sesión en un solo sitio.
- Traduce las excepciones de httpx a la taxonomía de `robolt.core.errors`.
- Facilita testeo: acepta un `httpx.MockTransport` en lugar de la red.
"""

from __future__ import annotations

import logging

import httpx

from robolt.core.config import AppSettings
from robolt.core.errors import TransportError
from robolt.core.interfaces.transport import TransportResponse
from robolt.core.request import HttpRequest

logger = logging.getLogger(__name__)

SESSION_COOKIE = ".ROBLOSECURITY"


def build_async_client(
    settings: AppSettings | None = None,
    *,
    session_cookie: str | None = None,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con defaults seguros.

    Por qué un builder:
    - Centraliza timeouts/headers para que todos los endpoints se comporten igual.
    - `transport` permite inyectar `httpx.MockTransport` en tests.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)

    if session_cookie:
        headers["Cookie"] = f"{SESSION_COOKIE}={session_cookie}"

    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


class HttpxTransport:
    """`Transport` sobre un `httpx.AsyncClient` compartido."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    @classmethod
    def from_settings(
        cls,
        settings: AppSettings | None = None,
        *,
        session_cookie: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> HttpxTransport:
        return cls(
            build_async_client(settings, session_cookie=session_cookie, transport=transport)
        )

    async def send(self, request: HttpRequest) -> TransportResponse:
        try:
            response = await self._client.request(
                request.method,
                request.url,
                json=request.body,
            )
        except httpx.RequestError as exc:
            logger.warning("%s %s failed: %s", request.method, request.url, exc)
            raise TransportError(exc, url=request.url) from exc

        return TransportResponse(status_code=response.status_code, content=response.content)

    async def aclose(self) -> None:
        await self._client.aclose()
