"""Configuración de logging.

La librería solo emite registros con `logging.getLogger(__name__)`; quien la
usa decide handlers. `configure_logging` es el atajo que usa la CLI.

Nunca se registra el valor de la cookie de sesión: el formatter la redacta.
"""

from __future__ import annotations

import json
import logging
import re
from datetime import datetime, timezone

_SENSITIVE_PATTERNS = re.compile(
    r"(\.?roblosecurity|cookie|x-csrf-token)[\s]*[=:]\s*[^\s;,]+",
    re.IGNORECASE,
)

_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def sanitize(text: str) -> str:
    """Remove session credentials from log text."""

    return _SENSITIVE_PATTERNS.sub(r"\1=[REDACTED]", text)


class JsonFormatter(logging.Formatter):
    """Formats log records as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": sanitize(record.getMessage()),
        }
        if record.exc_info and record.exc_info[1]:
            entry["exception"] = sanitize(self.formatException(record.exc_info))
        return json.dumps(entry, default=str)


class RedactingFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        return sanitize(super().format(record))


def configure_logging(level: str = "WARNING", *, json_output: bool = False) -> None:
    """Configure the `robolt` logger hierarchy.

    Parameters
    ----------
    level:
        Log level string (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    json_output:
        Emit JSON lines instead of plain text.
    """

    logger = logging.getLogger("robolt")
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    # Evita handlers duplicados si se llama más de una vez.
    logger.handlers.clear()

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter() if json_output else RedactingFormatter(_TEXT_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
