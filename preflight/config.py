"""Runtime configuration: environment variables read at startup.

PREFLIGHT_MODE          local (default) | cloud. Reported to clients so the UI
                        knows whether saved scenarios live on this server or
                        only in the browser/device store.
PREFLIGHT_CORS_ORIGINS  Comma-separated allowed origins for the web client.
PREFLIGHT_LOG_LEVEL     Level name for the "preflight" logger tree (INFO).
"""

from __future__ import annotations

import logging
import os
from typing import Literal

PreflightMode = Literal["local", "cloud"]
_VALID_MODES: frozenset[str] = frozenset({"local", "cloud"})

DEFAULT_CORS_ORIGINS = ("http://localhost:5173", "http://127.0.0.1:5173")

logger = logging.getLogger("preflight")


def get_mode() -> PreflightMode:
    """Return the current PREFLIGHT_MODE value, defaulting to ``'local'``.

    Unrecognised values fall back to ``'local'`` with a warning so that a
    misconfigured deployment never silently breaks.
    """
    raw = os.environ.get("PREFLIGHT_MODE", "local").strip().lower()
    if raw not in _VALID_MODES:
        logger.warning(
            "Unknown PREFLIGHT_MODE=%r, falling back to 'local'. "
            "Valid values are: %s",
            raw,
            ", ".join(sorted(_VALID_MODES)),
        )
        return "local"
    return raw  # type: ignore[return-value]


def get_cors_origins() -> list[str]:
    """Allowed CORS origins; empty entries are ignored."""
    raw = os.environ.get("PREFLIGHT_CORS_ORIGINS")
    if raw is None:
        return list(DEFAULT_CORS_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def get_log_level() -> int:
    """Numeric logging level from PREFLIGHT_LOG_LEVEL (INFO if unset or invalid)."""
    name = os.environ.get("PREFLIGHT_LOG_LEVEL", "INFO").strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        logger.warning("Unknown PREFLIGHT_LOG_LEVEL=%r, using INFO", name)
        return logging.INFO
    return level
