from __future__ import annotations

import logging
import os
from typing import Optional

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_DATEFMT = "%H:%M:%S"
LEVEL_ENV = "GAUGEDEMO_LOG_LEVEL"
DEBUG_ENV = "GAUGEDEMO_DEBUG"


def _parse_level(text: Optional[str]) -> Optional[int]:
    token = (text or "").strip()
    if not token:
        return None
    if token.isdigit():
        return int(token)
    level = logging.getLevelName(token.upper())
    return level if isinstance(level, int) else logging.INFO


def _level_from_env() -> Optional[int]:
    level = _parse_level(os.getenv(LEVEL_ENV))
    if level is not None:
        return level
    if (os.getenv(DEBUG_ENV) or "").strip().lower() in {"1", "true", "yes", "on"}:
        return logging.DEBUG
    return None


def configure_root(default_level: int | str = logging.INFO) -> int:
    """
    Set up the root logger for the gauge app and return the level in effect.

    ``GAUGEDEMO_LOG_LEVEL`` (name or number) wins over ``default_level``; an
    unknown name means INFO. ``GAUGEDEMO_DEBUG`` set to a truthy value selects
    DEBUG when no explicit level is given.
    """
    if isinstance(default_level, str):
        fallback = _parse_level(default_level) or logging.INFO
    else:
        fallback = int(default_level)
    env_level = _level_from_env()
    effective = fallback if env_level is None else env_level

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=effective, format=_FORMAT, datefmt=_DATEFMT)
    root.setLevel(effective)
    return effective


def level_name(level: int) -> str:
    """Return logging level name for diagnostics."""
    return logging.getLevelName(level)
