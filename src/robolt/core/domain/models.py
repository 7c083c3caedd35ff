"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Validación estricta en el borde: un campo obligatorio ausente es un error de
  decodificación, nunca un valor por defecto.
- Los alias absorben la convención camelCase/PascalCase de la API sin filtrarla
  al resto del código.

Nota:
- Estos modelos describen *qué* devuelve la plataforma, no *cómo* se obtiene.
- Son inmutables (`frozen`): se producen al deserializar y solo se leen.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum, IntEnum

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict

from robolt.core.errors import UnrecognizedBadgeError


class ApiModel(BaseModel):
    """Base común: camelCase en el cable, snake_case en Python."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )


# ── Users ────────────────────────────────────────────────────────────────────


class User(ApiModel):
    """Perfil público completo de un usuario."""

    id: int = Field(..., ge=0, description="Id numérico del usuario.")
    username: str = Field(..., alias="name", description="Nombre de usuario (handle).")
    display_name: str = Field(..., description="Nombre visible.")
    description: str | None = Field(default=None, description="Bio pública, si existe.")
    created: datetime = Field(..., description="Fecha de creación de la cuenta (UTC).")
    is_banned: bool = Field(..., description="La cuenta está baneada.")
    external_app_display_name: str | None = Field(
        default=None,
        description="Nombre mostrado en apps externas (si aplica).",
    )
    has_verified_badge: bool = Field(..., description="Tiene la insignia de verificación.")


class PartialUser(ApiModel):
    """Forma reducida que devuelven los endpoints legacy (PascalCase)."""

    id: int = Field(..., alias="Id", ge=0)
    username: str = Field(..., alias="Username")


class AuthenticatedUser(ApiModel):
    """Identidad de la sesión actual (who-am-I)."""

    id: int = Field(..., ge=0)
    username: str = Field(..., alias="name")
    display_name: str


# ── Presence ─────────────────────────────────────────────────────────────────


class PresenceType(IntEnum):
    OFFLINE = 0
    ONLINE = 1
    IN_GAME = 2
    IN_STUDIO = 3
    INVISIBLE = 4


class UserPresence(ApiModel):
    """Estado de presencia devuelto por el servicio de presence."""

    user_id: int
    user_presence_type: PresenceType
    last_location: str | None = None
    place_id: int | None = None
    root_place_id: int | None = None
    game_id: str | None = None
    universe_id: int | None = None
    last_online: datetime | None = None

    def is_online(self) -> bool:
        return self.user_presence_type not in (PresenceType.OFFLINE, PresenceType.INVISIBLE)


class FriendPresence(ApiModel):
    """Presencia embebida en la lista de amigos online (tipos como texto)."""

    user_presence_type: str = Field(..., alias="UserPresenceType")
    user_location_type: str | None = Field(default=None, alias="UserLocationType")
    last_location: str | None = None
    place_id: int | None = None
    root_place_id: int | None = None
    game_instance_id: str | None = None
    universe_id: int | None = None
    last_online: datetime | None = None


# ── Friends ──────────────────────────────────────────────────────────────────


class FriendshipStatus(str, Enum):
    NOT_FRIENDS = "NotFriends"
    FRIENDS = "Friends"
    REQUEST_SENT = "RequestSent"
    REQUEST_RECEIVED = "RequestReceived"


class UserRelationship(ApiModel):
    """Relación entre la sesión actual y otro usuario."""

    id: int
    status: FriendshipStatus

    def is_friend(self) -> bool:
        return self.status is FriendshipStatus.FRIENDS


class OnlineFriend(ApiModel):
    id: int
    username: str = Field(..., alias="name")
    display_name: str
    presence: FriendPresence = Field(..., alias="userPresence")


class FriendRequestInfo(ApiModel):
    sent_at: datetime
    sender_id: int
    source_universe_id: int | None = None
    origin_source_type: str
    contact_name: str | None = None


class FriendRequest(User):
    """Solicitud de amistad: el perfil del remitente más los datos de la solicitud."""

    friend_request: FriendRequestInfo
    mutual_friends_list: list[str]


# ── Badges ───────────────────────────────────────────────────────────────────


class BadgeAwardStatistics(ApiModel):
    past_day_awarded_count: int
    awarded_count: int
    win_rate_percentage: float


class AwardingUniverse(ApiModel):
    id: int
    name: str
    root_place_id: int


class Badge(ApiModel):
    """Insignia de experiencia (creada por desarrolladores)."""

    id: int = Field(..., ge=0)
    name: str
    description: str | None = None
    display_name: str
    display_description: str | None = None
    enabled: bool
    icon_image_id: int
    display_icon_image_id: int
    created: datetime
    updated: datetime
    statistics: BadgeAwardStatistics
    awarding_universe: AwardingUniverse | None = Field(
        default=None,
        description="Universo que otorga la insignia (ausente en algunas respuestas).",
    )


class BadgeAwardDate(ApiModel):
    badge_id: int
    awarded_date: datetime


class BadgeUpdate(ApiModel):
    """Payload de `PATCH /v1/badges/{id}`: solo viajan los campos fijados."""

    name: str | None = None
    description: str | None = None
    enabled: bool | None = None


class RobloxBadge(str, Enum):
    """Insignias de plataforma (otorgadas por la propia plataforma)."""

    WELCOME_TO_THE_CLUB = "Welcome To The Club"
    ADMINISTRATOR = "Administrator"
    VETERAN = "Veteran"
    FRIENDSHIP = "Friendship"
    AMBASSADOR = "Ambassador"
    INVITER = "Inviter"
    HOMESTEAD = "Homestead"
    BRICKSMITH = "Bricksmith"
    OFFICIAL_MODEL_MAKER = "Official Model Maker"
    COMBAT_INITIATION = "Combat Initiation"
    WARRIOR = "Warrior"
    BLOXXER = "Bloxxer"

    @classmethod
    def from_name(cls, name: str) -> "RobloxBadge":
        """Map a display name to its badge; unknown names raise `UnrecognizedBadgeError`."""

        try:
            return cls(name)
        except ValueError:
            raise UnrecognizedBadgeError(name) from None
