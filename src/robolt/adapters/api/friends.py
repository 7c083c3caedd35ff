"""Endpoints del grafo social: amigos, seguidores y solicitudes.

Las operaciones sobre "mis" relaciones exigen `FriendsApi[Authenticated]`;
algunas resuelven primero el id propio (who-am-I) dentro de la misma llamada.
"""

from __future__ import annotations

from collections.abc import Iterable

from robolt.adapters.api.users import UsersApi
from robolt.core.client import Authenticated, S
from robolt.core.domain.envelopes import Count, CountResponse, DataResponse, EmptyResponse
from robolt.core.domain.models import (
    FriendRequest,
    OnlineFriend,
    User,
    UserRelationship,
)


def _join_ids(ids: Iterable[int]) -> str:
    return ",".join(str(i) for i in ids)


class FriendsApi(UsersApi[S]):
    async def fetch_follower_count(self, user_id: int) -> int:
        res = await self.request_builder(
            f"{self.endpoints.friends}/v1/users/{user_id}/followers/count"
        ).send(CountResponse[Count])
        return res.count

    async def fetch_following_count(self, user_id: int) -> int:
        res = await self.request_builder(
            f"{self.endpoints.friends}/v1/users/{user_id}/followings/count"
        ).send(CountResponse[Count])
        return res.count

    async def fetch_friend_count(self, user_id: int) -> int:
        res = await self.request_builder(
            f"{self.endpoints.friends}/v1/users/{user_id}/friends/count"
        ).send(CountResponse[Count])
        return res.count

    async def fetch_friends(self, user_id: int) -> list[User]:
        res = await self.request_builder(
            f"{self.endpoints.friends}/v1/users/{user_id}/friends"
        ).send(DataResponse[User])
        return res.data

    async def fetch_followers(self, user_id: int, limit: int = 10) -> list[User]:
        res = await self.request_builder(
            f"{self.endpoints.friends}/v1/users/{user_id}/followers?limit={limit}"
        ).send(DataResponse[User])
        return res.data

    async def fetch_followings(self, user_id: int, limit: int = 10) -> list[User]:
        res = await self.request_builder(
            f"{self.endpoints.friends}/v1/users/{user_id}/followings?limit={limit}"
        ).send(DataResponse[User])
        return res.data

    # ── Solo con sesión ──────────────────────────────────────────────────────

    async def my_friend_requests(
        self: FriendsApi[Authenticated], limit: int = 10
    ) -> list[FriendRequest]:
        res = await self.request_builder(
            f"{self.endpoints.friends}/v1/my/friends/requests?limit={limit}"
        ).send(DataResponse[FriendRequest])
        return res.data

    async def my_friend_request_count(self: FriendsApi[Authenticated]) -> int:
        res = await self.request_builder(
            f"{self.endpoints.friends}/v1/user/friend-requests/count"
        ).send(CountResponse[Count])
        return res.count

    async def my_friend_count(self: FriendsApi[Authenticated]) -> int:
        res = await self.request_builder(
            f"{self.endpoints.friends}/v1/my/friends/count"
        ).send(CountResponse[Count])
        return res.count

    async def unfriend(self: FriendsApi[Authenticated], user_id: int) -> None:
        await self._post_action(f"/v1/users/{user_id}/unfriend")

    async def unfollow(self: FriendsApi[Authenticated], user_id: int) -> None:
        await self._post_action(f"/v1/users/{user_id}/unfollow")

    async def decline_friend_request(self: FriendsApi[Authenticated], user_id: int) -> None:
        await self._post_action(f"/v1/users/{user_id}/decline-friend-request")

    async def accept_friend_request(self: FriendsApi[Authenticated], user_id: int) -> None:
        await self._post_action(f"/v1/users/{user_id}/accept-friend-request")

    async def decline_all_friend_requests(self: FriendsApi[Authenticated]) -> None:
        await self._post_action("/v1/user/friend-requests/decline-all")

    async def my_online_friends(self: FriendsApi[Authenticated]) -> list[OnlineFriend]:
        me = await self.fetch_my_user()
        res = await self.request_builder(
            f"{self.endpoints.friends}/v1/users/{me.id}/friends/online"
        ).send(DataResponse[OnlineFriend])
        return res.data

    async def my_friendship_statuses(
        self: FriendsApi[Authenticated], user_ids: Iterable[int]
    ) -> list[UserRelationship]:
        """Estado de relación con cada id.

        Un id que la API no devuelve simplemente no aparece en el resultado;
        no se asume "no amigos".
        """

        me = await self.fetch_my_user()
        res = await self.request_builder(
            f"{self.endpoints.friends}/v1/users/{me.id}/friends/statuses"
            f"?userIds={_join_ids(user_ids)}"
        ).send(DataResponse[UserRelationship])
        return res.data

    async def _post_action(self, path: str) -> None:
        await (
            self.request_builder(f"{self.endpoints.friends}{path}")
            .method("POST")
            .send(EmptyResponse)
        )
