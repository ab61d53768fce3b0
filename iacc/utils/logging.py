"""Root logger setup for the list client.

``IACC_LOG_LEVEL`` (a name such as ``debug`` or a number) wins over
everything; otherwise a truthy ``IACC_DEBUG`` selects DEBUG. The settings
flag only applies when neither is set.
"""

from __future__ import annotations

import logging
import os
from typing import Mapping, Optional

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_DATEFMT = "%H:%M:%S"
_TRUTHY = {"1", "true", "yes", "on"}


def env_level(environ: Optional[Mapping[str, str]] = None) -> Optional[int]:
    """Return the level forced by the environment, or ``None``."""
    env = os.environ if environ is None else environ
    raw = (env.get("IACC_LOG_LEVEL") or "").strip()
    if raw:
        try:
            return int(raw)
        except ValueError:
            level = logging.getLevelName(raw.upper())
            if isinstance(level, int):
                return level
    if (env.get("IACC_DEBUG") or "").strip().lower() in _TRUTHY:
        return logging.DEBUG
    return None


def env_forces_debug(environ: Optional[Mapping[str, str]] = None) -> bool:
    level = env_level(environ)
    return level is not None and level <= logging.DEBUG


def configure_root(default_level: int = logging.INFO) -> int:
    level = env_level()
    if level is None:
        level = default_level
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format=_FORMAT, datefmt=_DATEFMT)
    root.setLevel(level)
    return level


def apply_preferences(debug_enabled: bool) -> int:
    """Apply the settings debug flag unless the environment pins a level."""
    level = env_level()
    if level is None:
        level = logging.DEBUG if debug_enabled else logging.INFO
    logging.getLogger().setLevel(level)
    return level


__all__ = ["apply_preferences", "configure_root", "env_forces_debug", "env_level"]
