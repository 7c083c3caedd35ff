"""Puntos acumulados de un usuario en un universo."""

from __future__ import annotations

from robolt.core.client import BaseClient, S
from robolt.core.domain.models import ApiModel


class _AllTimeScore(ApiModel):
    all_time_score: int


class PointsApi(BaseClient[S]):
    async def points(self, user_id: int, universe_id: int) -> int:
        res = await self.request_builder(
            f"{self.endpoints.points}/v1/universes/{universe_id}/users/{user_id}/all-time"
        ).send(_AllTimeScore)
        return res.all_time_score
