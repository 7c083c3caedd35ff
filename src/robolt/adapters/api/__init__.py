"""Endpoints de la plataforma agrupados por servicio.

Cada módulo es un mixin genérico sobre el estado de autenticación; `robolt.client`
los compone en el cliente final.
"""

from robolt.adapters.api.badges import BadgesApi, BadgeUpdateBuilder
from robolt.adapters.api.friends import FriendsApi
from robolt.adapters.api.points import PointsApi
from robolt.adapters.api.presence import PresenceApi
from robolt.adapters.api.users import UsersApi

__all__ = [
	"BadgeUpdateBuilder",
	"BadgesApi",
	"FriendsApi",
	"PointsApi",
	"PresenceApi",
	"UsersApi",
]
