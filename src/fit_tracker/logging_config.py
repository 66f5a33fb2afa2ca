"""Inicialización del logging raíz (formato y nivel)."""

from __future__ import annotations

import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def resolve_level(name: str | None = None) -> int:
    """Map a level name to its logging constant.

    Args:
        name: Level name such as "debug" or "WARNING". Falls back to the
            ``LOG_LEVEL`` environment variable, then to INFO.

    Raises:
        ValueError: If the name is not a standard logging level.
    """
    level_name = (name or os.environ.get("LOG_LEVEL") or "INFO").strip().upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise ValueError(f"Nivel de log desconocido: {level_name!r}")
    return level


def setup_logging(level: str | None = None) -> None:
    """Configure the root logger once, with the resolved level."""
    logging.basicConfig(level=resolve_level(level), format=LOG_FORMAT)
