"""Pipeline de peticiones tipadas.

Flujo:
- `BaseClient.request_builder(url)` crea un `RequestBuilder` (GET, sin body).
- El builder acumula método/body de forma fluida.
- `send(shape)` congela la petición en un `HttpRequest`, la ejecuta con el
  transporte del cliente y deserializa la respuesta como `shape`.

Un único intento por llamada: sin reintentos ni backoff.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING, Any, TypeVar, cast

from pydantic import BaseModel, TypeAdapter, ValidationError
from pydantic_core import to_jsonable_python

from robolt.core.domain.envelopes import EmptyResponse
from robolt.core.errors import DecodeError, HttpError

if TYPE_CHECKING:
    from robolt.core.client import BaseClient

logger = logging.getLogger(__name__)

R = TypeVar("R")


@dataclass(frozen=True)
class HttpRequest:
    """Descripción inmutable de una llamada HTTP.

    `body` ya está en forma JSON-compatible (dict/list/escalares) o es `None`.
    """

    method: str
    url: str
    body: Any = None


@lru_cache(maxsize=256)
def _adapter(shape: Any) -> TypeAdapter[Any]:
    return TypeAdapter(shape)


def serialize_body(payload: Any) -> Any:
    """Convert a payload into JSON-compatible data.

    Pydantic models travel by alias and without unset (`None`) fields, so a
    partial update only carries what the caller set.
    """

    if isinstance(payload, BaseModel):
        return payload.model_dump(mode="json", by_alias=True, exclude_none=True)
    return to_jsonable_python(payload, by_alias=True)


class RequestBuilder:
    """Builder fluido para una única petición.

    Solo `BaseClient.request_builder` debería instanciarlo: el builder toma el
    transporte del cliente y no guarda estado entre peticiones.
    """

    def __init__(self, client: BaseClient[Any], url: str) -> None:
        self._client = client
        self._url = url
        self._method = "GET"
        self._body: Any = None

    def method(self, method: str) -> RequestBuilder:
        self._method = method.upper()
        return self

    def body(self, payload: Any) -> RequestBuilder:
        """Adjunta un payload serializable (solo tiene sentido fuera de GET)."""

        self._body = serialize_body(payload)
        return self

    def build(self) -> HttpRequest:
        return HttpRequest(method=self._method, url=self._url, body=self._body)

    async def send(self, shape: type[R]) -> R:
        """Ejecuta la petición y deserializa la respuesta como `shape`.

        Raises
        ------
        TransportError
            No hubo respuesta HTTP (DNS, conexión, timeout).
        HttpError
            Status fuera de 2xx; el body no se intenta parsear.
        DecodeError
            Respuesta 2xx cuyo body no encaja con `shape`.
        """

        request = self.build()
        logger.debug("%s %s", request.method, request.url)

        response = await self._client.transport.send(request)

        if not response.is_success:
            logger.warning(
                "%s %s answered HTTP %d", request.method, request.url, response.status_code
            )
            raise HttpError(response.status_code, response.text, url=request.url)

        if shape is EmptyResponse:
            return cast(R, EmptyResponse())

        try:
            return cast(R, _adapter(shape).validate_json(response.content))
        except ValidationError as exc:
            logger.warning(
                "%s %s returned a body that is not a valid %s",
                request.method,
                request.url,
                getattr(shape, "__name__", shape),
            )
            raise DecodeError(exc, url=request.url) from exc

    async def send_body(self, payload: Any = None) -> None:
        """Envía `payload` como body y descarta la respuesta; `None` viaja sin body."""

        self.body(payload)
        await self.send(EmptyResponse)
