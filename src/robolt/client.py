"""Cliente final: compone los endpoints sobre el pipeline tipado.

Uso::

    async with Robolt.anonymous() as client:
        count = await client.fetch_friend_count(123)

    async with Robolt.authenticated(cookie) as client:
        requests = await client.my_friend_requests(limit=10)

`Robolt[Authenticated]` solo se obtiene por `authenticated()` o por
`authenticate()` sobre un cliente existente; nunca por casting.
"""

from __future__ import annotations

import logging

from robolt.adapters.api import BadgesApi, FriendsApi, PointsApi, PresenceApi
from robolt.adapters.http_client import HttpxTransport
from robolt.core.client import Anonymous, Authenticated, S
from robolt.core.config import AppSettings
from robolt.core.errors import ConfigurationError
from robolt.core.interfaces.transport import Transport

logger = logging.getLogger(__name__)


class Robolt(FriendsApi[S], BadgesApi[S], PointsApi[S], PresenceApi[S]):
    @classmethod
    def anonymous(
        cls,
        settings: AppSettings | None = None,
        *,
        transport: Transport | None = None,
    ) -> Robolt[Anonymous]:
        settings = settings or AppSettings()
        transport = transport or HttpxTransport.from_settings(settings)
        return Robolt[Anonymous](transport, settings)

    @classmethod
    def authenticated(
        cls,
        session_cookie: str | None = None,
        settings: AppSettings | None = None,
        *,
        transport: Transport | None = None,
    ) -> Robolt[Authenticated]:
        """Crea un cliente con sesión.

        La cookie se toma de `session_cookie` o, en su defecto, de
        `settings.roblosecurity` (`ROBOLT_ROBLOSECURITY`).

        Raises
        ------
        ConfigurationError
            No hay credencial de sesión disponible.
        """

        settings = settings or AppSettings()
        if not session_cookie and settings.roblosecurity is not None:
            session_cookie = settings.roblosecurity.get_secret_value()
        if not session_cookie:
            raise ConfigurationError(
                "an authenticated client needs a .ROBLOSECURITY session cookie "
                "(pass it explicitly or set ROBOLT_ROBLOSECURITY)"
            )

        transport = transport or HttpxTransport.from_settings(settings, session_cookie=session_cookie)
        logger.debug("Created authenticated client")
        return Robolt[Authenticated](transport, settings)

    def authenticate(
        self,
        session_cookie: str,
        *,
        transport: Transport | None = None,
    ) -> Robolt[Authenticated]:
        """Upgrade explícito: devuelve un cliente nuevo con la misma configuración.

        Este cliente no cambia y conserva su propio transporte.
        """

        return Robolt.authenticated(session_cookie, self.settings, transport=transport)
