"""Endpoints de usuarios.

- Perfil completo por id (`users` service).
- Forma reducida/legacy por id o por username (`base` service).
- Who-am-I para clientes autenticados.
"""

from __future__ import annotations

from urllib.parse import urlencode

from robolt.adapters.api._lookup import not_found_on_404
from robolt.core.client import Authenticated, BaseClient, S
from robolt.core.domain.models import AuthenticatedUser, PartialUser, User


class UsersApi(BaseClient[S]):
    async def fetch_user(self, user_id: int) -> User:
        with not_found_on_404():
            return await self.request_builder(
                f"{self.endpoints.users}/v1/users/{user_id}"
            ).send(User)

    async def fetch_partial_user(self, user_id: int) -> PartialUser:
        with not_found_on_404():
            return await self.request_builder(
                f"{self.endpoints.base}/users/{user_id}"
            ).send(PartialUser)

    async def find_user(self, username: str) -> PartialUser:
        query = urlencode({"username": username})
        with not_found_on_404():
            return await self.request_builder(
                f"{self.endpoints.base}/users/get-by-username?{query}"
            ).send(PartialUser)

    async def fetch_my_user(self: UsersApi[Authenticated]) -> AuthenticatedUser:
        """Resuelve la identidad de la sesión (sin caché: una llamada por uso)."""

        return await self.request_builder(
            f"{self.endpoints.users}/v1/users/authenticated"
        ).send(AuthenticatedUser)
