"""Endpoints de insignias.

Dos familias:
- Insignias de experiencia (`badges` service): lectura pública, edición y
  borrado con sesión.
- Insignias de plataforma (`web`): se devuelven por nombre visible y se mapean
  a `RobloxBadge`; un nombre desconocido es un error de decodificación.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from robolt.adapters.api._lookup import not_found_on_404
from robolt.core.client import Authenticated, BaseClient, S
from robolt.core.domain.envelopes import DataResponse, EmptyResponse
from robolt.core.domain.models import Badge, BadgeAwardDate, BadgeUpdate, RobloxBadge
from robolt.core.errors import UnrecognizedBadgeError

logger = logging.getLogger(__name__)


class _RobloxBadgeResult(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str = Field(..., alias="Name")


class _RobloxBadgesResult(BaseModel):
    model_config = ConfigDict(extra="ignore")

    roblox_badges: list[_RobloxBadgeResult] = Field(..., alias="RobloxBadges")


class BadgeUpdateBuilder:
    """Builder fluido para `PATCH /v1/badges/{id}`.

    Solo los campos fijados viajan en el body.
    """

    def __init__(self, client: BadgesApi[Authenticated], badge_id: int) -> None:
        self._client = client
        self._badge_id = badge_id
        self._fields: dict[str, Any] = {}

    def name(self, name: str) -> BadgeUpdateBuilder:
        self._fields["name"] = name
        return self

    def description(self, description: str) -> BadgeUpdateBuilder:
        self._fields["description"] = description
        return self

    def enabled(self, enabled: bool) -> BadgeUpdateBuilder:
        self._fields["enabled"] = enabled
        return self

    def payload(self) -> BadgeUpdate:
        return BadgeUpdate(**self._fields)

    async def update(self) -> None:
        await (
            self._client.request_builder(
                f"{self._client.endpoints.badges}/v1/badges/{self._badge_id}"
            )
            .method("PATCH")
            .send_body(self.payload())
        )


class BadgesApi(BaseClient[S]):
    async def fetch_badge(self, badge_id: int) -> Badge:
        with not_found_on_404():
            return await self.request_builder(
                f"{self.endpoints.badges}/v1/badges/{badge_id}"
            ).send(Badge)

    async def fetch_game_badges(self, universe_id: int, limit: int = 100) -> list[Badge]:
        res = await self.request_builder(
            f"{self.endpoints.badges}/v1/universes/{universe_id}/badges?limit={limit}"
        ).send(DataResponse[Badge])
        return res.data

    async def fetch_user_badges(self, user_id: int, limit: int = 100) -> list[Badge]:
        res = await self.request_builder(
            f"{self.endpoints.badges}/v1/users/{user_id}/badges?limit={limit}"
        ).send(DataResponse[Badge])
        return res.data

    async def fetch_user_awarded_badge_dates(
        self, user_id: int, badge_ids: Iterable[int]
    ) -> list[BadgeAwardDate]:
        ids = ",".join(str(i) for i in badge_ids)
        res = await self.request_builder(
            f"{self.endpoints.badges}/v1/users/{user_id}/badges/awarded-dates?badgeIds={ids}"
        ).send(DataResponse[BadgeAwardDate])
        return res.data

    async def fetch_roblox_badges(self, user_id: int) -> list[RobloxBadge]:
        """Insignias de plataforma del usuario.

        Raises
        ------
        UnrecognizedBadgeError
            La API devolvió un nombre sin mapeo conocido.
        """

        res = await self.request_builder(
            f"{self.endpoints.web}/badges/roblox?userId={user_id}"
        ).send(_RobloxBadgesResult)
        badges: list[RobloxBadge] = []
        for item in res.roblox_badges:
            try:
                badges.append(RobloxBadge.from_name(item.name))
            except UnrecognizedBadgeError:
                logger.warning("Unrecognized platform badge %r for user %d", item.name, user_id)
                raise
        return badges

    async def has_roblox_badge(self, user_id: int, badge: RobloxBadge) -> bool:
        return badge in await self.fetch_roblox_badges(user_id)

    # ── Solo con sesión ──────────────────────────────────────────────────────

    def update_badge(self: BadgesApi[Authenticated], badge_id: int) -> BadgeUpdateBuilder:
        return BadgeUpdateBuilder(self, badge_id)

    async def remove_badge(self: BadgesApi[Authenticated], badge_id: int) -> None:
        await (
            self.request_builder(f"{self.endpoints.badges}/v1/user/badges/{badge_id}")
            .method("DELETE")
            .send(EmptyResponse)
        )
