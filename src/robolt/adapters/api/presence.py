"""Presencia (online / en juego / en Studio) de varios usuarios a la vez."""

from __future__ import annotations

from collections.abc import Iterable

from robolt.core.client import BaseClient, S
from robolt.core.domain.models import ApiModel, UserPresence


class _PresenceQuery(ApiModel):
    user_ids: list[int]


class _PresenceResult(ApiModel):
    user_presences: list[UserPresence]


class PresenceApi(BaseClient[S]):
    async def fetch_presences(self, user_ids: Iterable[int]) -> list[UserPresence]:
        """Presencia de cada id, en el orden que devuelve la API."""

        res = await (
            self.request_builder(f"{self.endpoints.presence}/v1/presence/users")
            .method("POST")
            .body(_PresenceQuery(user_ids=list(user_ids)))
            .send(_PresenceResult)
        )
        return res.user_presences
