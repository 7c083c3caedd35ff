"""robolt: cliente asíncrono y tipado para los servicios web de Roblox."""

from robolt.client import Robolt
from robolt.core.client import Anonymous, Authenticated
from robolt.core.config import AppSettings, Endpoints
from robolt.core.errors import (
    ApiError,
    ConfigurationError,
    DecodeError,
    HttpError,
    NotFoundError,
    RoboltError,
    TransportError,
    UnrecognizedBadgeError,
)

__all__ = [
	"Anonymous",
	"ApiError",
	"AppSettings",
	"Authenticated",
	"ConfigurationError",
	"DecodeError",
	"Endpoints",
	"HttpError",
	"NotFoundError",
	"Robolt",
	"RoboltError",
	"TransportError",
	"UnrecognizedBadgeError",
]
