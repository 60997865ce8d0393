"""
Purpose: Environment-driven settings and the fixed protocol constants.
One place for the sentinel, header name and user-facing fallback texts so the
exchange client and the UI never hard-code them.
"""

from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from typing import Optional

INIT_SENTINEL = "TEST_FLOW"
SESSION_HEADER = "X-Session-Id"

FALLBACK_REPLY = "Error al obtener respuesta"
ERROR_REPLY = "Lo siento, ha ocurrido un error al procesar tu mensaje."

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    if raw is None or not raw.strip():
        return None
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"WEBHOOK_CHAT_TIMEOUT must be a number, got {raw!r}")
    return value if value > 0 else None


def _parse_level(raw: Optional[str]) -> str:
    level = (raw or "INFO").strip().upper() or "INFO"
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"WEBHOOK_CHAT_LOG_LEVEL must be a logging level name, got {raw!r}")
    return level


@dataclass(frozen=True)
class Settings:
    default_url: str = ""
    timeout: Optional[float] = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            default_url=os.getenv("WEBHOOK_CHAT_DEFAULT_URL", "").strip(),
            timeout=_parse_timeout(os.getenv("WEBHOOK_CHAT_TIMEOUT")),
            log_level=_parse_level(os.getenv("WEBHOOK_CHAT_LOG_LEVEL")),
        )


def configure_logging(settings: Settings) -> None:
    """Install the root handler once; Streamlit re-runs the script on every event."""
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
