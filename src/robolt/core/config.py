"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- El cliente y los adaptadores HTTP leen URLs base, timeouts y la credencial
  de sesión desde un único contrato.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import BaseModel, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "robolt"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "robolt"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "robolt"
    return Path.home() / ".config" / "robolt"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str], *, env_path: Path | None = None) -> Path:
    """Escribe/actualiza variables en el .env global del usuario."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# robolt user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class Endpoints(BaseModel):
    """Tabla de URLs base por servicio.

    Cada servicio de la plataforma vive en su propio subdominio; los endpoints
    concatenan la ruta (`/v1/...`) sobre estas bases.
    """

    base: str = Field(default="https://api.roblox.com", min_length=8)
    users: str = Field(default="https://users.roblox.com", min_length=8)
    friends: str = Field(default="https://friends.roblox.com", min_length=8)
    badges: str = Field(default="https://badges.roblox.com", min_length=8)
    points: str = Field(default="https://points.roblox.com", min_length=8)
    presence: str = Field(default="https://presence.roblox.com", min_length=8)
    web: str = Field(default="https://www.roblox.com", min_length=8)


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/cliente.
    """

    model_config = SettingsConfigDict(
        env_prefix="ROBOLT_",
        env_nested_delimiter="__",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
        frozen=True,
    )

    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="robolt/0.1 (+https://github.com/robolt)",
        min_length=1,
        description="User-Agent enviado en cada petición.",
    )
    roblosecurity: SecretStr | None = Field(
        default=None,
        description="Cookie de sesión `.ROBLOSECURITY` para clientes autenticados.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging por defecto (DEBUG, INFO, WARNING, ...).",
    )
    endpoints: Endpoints = Field(
        default_factory=Endpoints,
        description="URLs base por servicio (friends, badges, points, users, web).",
    )
