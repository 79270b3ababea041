"""Logging helpers scoped to the globe visualization package."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from globe_viz.render.textures import TextureStore

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"


def configure_logging(level: int | str = logging.INFO) -> None:
    """Install a single stream handler on the root logger."""

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT, force=True)


def format_texture_status(status: dict[str, bool]) -> str:
    parts = [f"{name}: {loaded}" for name, loaded in status.items()]
    return "Planet textures loaded: " + ", ".join(parts)


def log_texture_status(store: "TextureStore", logger: logging.Logger | None = None) -> None:
    (logger or logging.getLogger("globe_viz")).info(format_texture_status(store.texture_status()))


__all__ = ["LOG_FORMAT", "configure_logging", "format_texture_status", "log_texture_status"]
