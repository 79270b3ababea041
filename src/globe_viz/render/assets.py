from __future__ import annotations

from collections import OrderedDict
from pathlib import Path
from typing import Iterable

import numpy as np
import pygame


Color = tuple[int, int, int] | tuple[int, int, int, int]


def default_asset_dir() -> Path:
    return Path(__file__).resolve().parents[3] / "assets"


def load_raster(path: Path) -> np.ndarray:
    """Decode an image file into a ``(height, width, 3)`` uint8 array.

    Raises ``FileNotFoundError`` when the file is absent and ``pygame.error``
    (or ``ValueError`` for empty images) when it cannot be decoded.
    """

    if not path.is_file():
        raise FileNotFoundError(path)
    surface = pygame.image.load(path.as_posix())
    width, height = surface.get_size()
    if width <= 0 or height <= 0:
        raise ValueError(f"{path.name} decoded to an empty image")
    return np.ascontiguousarray(pygame.surfarray.array3d(surface).swapaxes(0, 1))


def raster_to_surface(pixels: np.ndarray) -> pygame.Surface:
    """Build an opaque surface from a ``(height, width, 3)`` array."""

    return pygame.surfarray.make_surface(np.ascontiguousarray(pixels[..., :3].swapaxes(0, 1)))


def rgba_to_surface(pixels: np.ndarray) -> pygame.Surface:
    """Build a per-pixel-alpha surface from a ``(height, width, 4)`` array."""

    height, width = pixels.shape[:2]
    surface = pygame.Surface((width, height), pygame.SRCALPHA)
    rgb = pygame.surfarray.pixels3d(surface)
    rgb[...] = pixels[..., :3].swapaxes(0, 1)
    del rgb
    alpha = pygame.surfarray.pixels_alpha(surface)
    alpha[...] = pixels[..., 3].T
    del alpha
    return surface


_TEXT_SURFACE_CACHE_MAX_SIZE = 128
_TEXT_SURFACE_CACHE: OrderedDict[tuple[int, str, Color], pygame.Surface] = OrderedDict()


def get_text_surface(font: pygame.font.Font, text: str, color: Color) -> pygame.Surface:
    """Return a cached rendered surface for the given font, text and color.

    HUD strings repeat every frame, so rendered glyphs are kept in a small LRU.
    """

    key = (id(font), text, color)
    cached = _TEXT_SURFACE_CACHE.get(key)
    if cached is not None:
        _TEXT_SURFACE_CACHE.move_to_end(key)
        return cached
    rendered = font.render(text, True, color)
    _TEXT_SURFACE_CACHE[key] = rendered
    if len(_TEXT_SURFACE_CACHE) > _TEXT_SURFACE_CACHE_MAX_SIZE:
        _TEXT_SURFACE_CACHE.popitem(last=False)
    return rendered


def load_font(preferred_names: Iterable[str], size: int, *, bold: bool = False) -> pygame.font.Font:
    names = list(preferred_names)
    for name in names:
        try:
            match = pygame.font.match_font(name, bold=bold)
        except Exception:
            match = None
        if match:
            return pygame.font.Font(match, size)
    font = pygame.font.Font(None, size)
    font.set_bold(bold)
    return font
