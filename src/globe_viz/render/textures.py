"""Texture store: decoded planet maps, the star background and the sphere cache."""
from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Callable

import numpy as np
import pygame

from globe_viz.core.config import SPHERE_CFG
from globe_viz.data.planets import PLANET_DEFINITIONS, Planet

from .assets import default_asset_dir, load_raster, raster_to_surface

logger = logging.getLogger(__name__)

STARS_FILENAME = "stars.jpg"
CACHE_FRESHNESS = SPHERE_CFG.cache_freshness


class TextureStore:
    """Owns every decoded raster plus a single-slot cache of the lit sphere.

    Rasters are ``(height, width, 3)`` uint8 arrays covering longitude
    [-pi, pi] along the width and latitude [-pi/2, pi/2] along the height.
    Nothing here raises to the caller: unreadable resources are logged and
    stay absent.
    """

    def __init__(
        self,
        asset_dir: Path | None = None,
        *,
        clock: Callable[[], float] = time.perf_counter,
        freshness: float = CACHE_FRESHNESS,
    ) -> None:
        self._asset_dir = asset_dir or default_asset_dir()
        self._clock = clock
        self._freshness = freshness
        self._textures: dict[str, np.ndarray] = {}
        self._stars: np.ndarray | None = None
        self._stars_surface: pygame.Surface | None = None
        self._cached_sphere: pygame.Surface | None = None
        self._cached_planet_key: str | None = None
        self._cached_at = 0.0

    @property
    def asset_dir(self) -> Path:
        return self._asset_dir

    def now(self) -> float:
        return self._clock()

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------
    def load_all(self) -> None:
        for planet in PLANET_DEFINITIONS:
            pixels = self._load(planet.texture_file, planet.name)
            if pixels is not None:
                self._textures[planet.key] = pixels
            else:
                self._textures.pop(planet.key, None)
        self.set_stars(self._load(STARS_FILENAME, "stars"))

    def _load(self, filename: str, label: str) -> np.ndarray | None:
        path = self._asset_dir / filename
        try:
            pixels = load_raster(path)
        except FileNotFoundError:
            logger.warning("Could not find texture file: %s", path)
            return None
        except (pygame.error, OSError, ValueError) as err:
            logger.error("Failed to load texture for %s: %s", label, err)
            return None
        logger.debug("Loaded texture for %s: %dx%d", label, pixels.shape[1], pixels.shape[0])
        return pixels

    def set_texture(self, planet: Planet, pixels: np.ndarray | None) -> None:
        """Install (or with ``None`` remove) the raster for ``planet``."""

        pixels = _validated(pixels, planet.name)
        if pixels is None:
            self._textures.pop(planet.key, None)
        else:
            self._textures[planet.key] = pixels
        if planet.key == self._cached_planet_key:
            self.cache_clear()

    def set_stars(self, pixels: np.ndarray | None) -> None:
        self._stars = _validated(pixels, "stars")
        self._stars_surface = None

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def texture_of(self, planet: Planet) -> np.ndarray | None:
        return self._textures.get(planet.key)

    def stars(self) -> np.ndarray | None:
        return self._stars

    def stars_surface(self) -> pygame.Surface | None:
        if self._stars is None:
            return None
        if self._stars_surface is None:
            self._stars_surface = raster_to_surface(self._stars)
        return self._stars_surface

    def all_loaded(self) -> bool:
        if self._stars is None:
            return False
        return all(planet.key in self._textures for planet in PLANET_DEFINITIONS)

    def texture_status(self) -> dict[str, bool]:
        status = {planet.name: planet.key in self._textures for planet in PLANET_DEFINITIONS}
        status["Stars"] = self._stars is not None
        return status

    # ------------------------------------------------------------------
    # Sphere cache
    # ------------------------------------------------------------------
    def cache_get(self) -> pygame.Surface | None:
        return self._cached_sphere

    def cache_put(self, raster: pygame.Surface, planet: Planet, now: float | None = None) -> None:
        self._cached_sphere = raster
        self._cached_planet_key = planet.key
        self._cached_at = self._clock() if now is None else now

    def cache_valid(self, planet: Planet, now: float | None = None) -> bool:
        if self._cached_sphere is None or self._cached_planet_key != planet.key:
            return False
        if now is None:
            now = self._clock()
        return (now - self._cached_at) < self._freshness

    def cache_clear(self) -> None:
        self._cached_sphere = None
        self._cached_planet_key = None
        self._cached_at = 0.0


def _validated(pixels: np.ndarray | None, label: str) -> np.ndarray | None:
    if pixels is None:
        return None
    pixels = np.asarray(pixels)
    if pixels.ndim != 3 or pixels.shape[2] < 3 or pixels.shape[0] < 1 or pixels.shape[1] < 1:
        logger.warning("Ignoring raster for %s with unusable shape %s", label, pixels.shape)
        return None
    return np.ascontiguousarray(pixels[..., :3], dtype=np.uint8)


__all__ = ["CACHE_FRESHNESS", "STARS_FILENAME", "TextureStore"]
