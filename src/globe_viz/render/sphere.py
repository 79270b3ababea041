"""Software sphere mapping of equirectangular planet textures."""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from functools import lru_cache

import numpy as np
import pygame

from globe_viz.core.config import RENDER_CFG, SPHERE_CFG, SphereCfg
from globe_viz.data.planets import Planet

from .assets import rgba_to_surface
from .draw import draw_circle_outline_alpha, draw_radial_gradient_disc
from .lighting import LightingModel
from .textures import TextureStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SphereGrid:
    """Per-radius geometry of the visible hemisphere.

    ``mask`` selects the pixels of the ``2r x 2r`` square with ``d2 <= 1``;
    the remaining arrays are flat and ordered like ``image[mask]``.
    """

    radius: int
    mask: np.ndarray
    d2: np.ndarray
    longitude: np.ndarray
    latitude: np.ndarray
    alpha: np.ndarray


def edge_alpha(d2: np.ndarray, floor: float = SPHERE_CFG.edge_alpha_floor) -> np.ndarray:
    """Opacity 255 * max(floor, 1 - d^3) for squared distances ``d2``."""

    fade = 1.0 - d2 * np.sqrt(d2)
    return (255.0 * np.maximum(floor, fade)).astype(np.uint8)


@lru_cache(maxsize=8)
def sphere_grid(radius: int) -> SphereGrid:
    if radius <= 0:
        raise ValueError("Sphere radius must be positive")
    size = radius * 2
    ys, xs = np.mgrid[0:size, 0:size]
    sx = (xs - radius) / float(radius)
    sy = (ys - radius) / float(radius)
    d2 = sx * sx + sy * sy
    mask = d2 <= 1.0

    d2_in = d2[mask]
    sz = np.sqrt(1.0 - d2_in)
    longitude = np.arctan2(sz, sx[mask])
    latitude = np.arcsin(np.clip(-sy[mask], -1.0, 1.0))
    alpha = edge_alpha(d2_in)

    for array in (mask, d2_in, longitude, latitude, alpha):
        array.setflags(write=False)
    return SphereGrid(
        radius=radius,
        mask=mask,
        d2=d2_in,
        longitude=longitude,
        latitude=latitude,
        alpha=alpha,
    )


def texture_coordinates(longitude: np.ndarray, latitude: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """Map (lon, lat) to (u, v); u wraps into [0, 1), v clamps to [0, 1]."""

    u = (longitude + math.pi) / (2.0 * math.pi)
    u = u - np.floor(u)
    v = np.clip((math.pi / 2.0 - latitude) / math.pi, 0.0, 1.0)
    return u, v


def sample_bilinear(pixels: np.ndarray, u, v) -> np.ndarray:
    """Bilinearly sample an ``(H, W, 3)`` raster at normalised coordinates.

    Columns wrap around (longitude is periodic) while rows clamp at the
    poles. Returns floored channel values as float64 with shape ``(..., 3)``.
    """

    height, width = pixels.shape[:2]
    x = np.asarray(u, dtype=np.float64) * width
    y = np.asarray(v, dtype=np.float64) * height
    x_floor = np.floor(x)
    y_floor = np.floor(y)
    fx = (x - x_floor)[..., np.newaxis]
    fy = (y - y_floor)[..., np.newaxis]

    x1 = x_floor.astype(np.int64) % width
    x2 = (x1 + 1) % width
    y1 = np.clip(y_floor.astype(np.int64), 0, height - 1)
    y2 = np.minimum(y1 + 1, height - 1)

    c1 = pixels[y1, x1, :3].astype(np.float64)
    c2 = pixels[y1, x2, :3].astype(np.float64)
    c3 = pixels[y2, x1, :3].astype(np.float64)
    c4 = pixels[y2, x2, :3].astype(np.float64)
    blended = (
        c1 * (1.0 - fx) * (1.0 - fy)
        + c2 * fx * (1.0 - fy)
        + c3 * (1.0 - fx) * fy
        + c4 * fx * fy
    )
    return np.floor(blended)


def enhance_colors(rgb: np.ndarray, cfg: SphereCfg = SPHERE_CFG) -> np.ndarray:
    return np.minimum(255.0, np.floor(rgb * cfg.enhance_gain + cfg.enhance_offset))


def render_sphere_pixels(
    texture: np.ndarray,
    radius: int,
    rotation: float,
    lighting: LightingModel,
    cfg: SphereCfg = SPHERE_CFG,
) -> np.ndarray:
    """Project ``texture`` onto a lit disc; returns a ``(2r, 2r, 4)`` RGBA array."""

    grid = sphere_grid(radius)
    longitude = grid.longitude + rotation
    u, v = texture_coordinates(longitude, grid.latitude)

    rgb = sample_bilinear(texture, u, v)
    rgb = enhance_colors(rgb, cfg)
    rgb = lighting.shade_rgb(rgb, lighting.intensity(longitude, grid.latitude))

    size = radius * 2
    out = np.zeros((size, size, 4), dtype=np.uint8)
    out[grid.mask, :3] = rgb.astype(np.uint8)
    out[grid.mask, 3] = grid.alpha
    return out


class SphereRenderer:
    """Draws planets as lit, textured discs backed by the store's sphere cache."""

    def __init__(
        self,
        textures: TextureStore,
        lighting: LightingModel,
        *,
        cfg: SphereCfg = SPHERE_CFG,
    ) -> None:
        self._textures = textures
        self._lighting = lighting
        self._cfg = cfg
        self._reported_missing: set[str] = set()
        self.rasters_built = 0

    @property
    def textures(self) -> TextureStore:
        return self._textures

    @property
    def lighting(self) -> LightingModel:
        return self._lighting

    def draw_planet(
        self,
        surface: pygame.Surface,
        center: tuple[int, int],
        radius: int,
        planet: Planet,
        rotation: float,
    ) -> None:
        if radius <= 0:
            return
        cx, cy = center
        now = self._textures.now()
        cached = self._textures.cache_get()
        if (
            cached is not None
            and cached.get_width() == radius * 2
            and self._textures.cache_valid(planet, now)
        ):
            surface.blit(cached, (cx - radius, cy - radius))
            self.draw_planet_outline(surface, center, radius)
            return

        texture = self._textures.texture_of(planet)
        if texture is None:
            if planet.key not in self._reported_missing:
                logger.debug("Texture not found for %s, using fallback", planet.name)
                self._reported_missing.add(planet.key)
            self.draw_fallback_planet(surface, center, radius, planet)
            return

        pixels = render_sphere_pixels(texture, radius, rotation, self._lighting, self._cfg)
        raster = rgba_to_surface(pixels)
        self.rasters_built += 1
        self._textures.cache_put(raster, planet, now)
        surface.blit(raster, (cx - radius, cy - radius))
        self.draw_planet_outline(surface, center, radius)

    def draw_planet_outline(self, surface: pygame.Surface, center: tuple[int, int], radius: int) -> None:
        draw_circle_outline_alpha(
            surface, self._cfg.outline_color, center, radius, self._cfg.outline_width
        )

    def fallback_stops(self, planet: Planet) -> tuple[tuple[float, tuple[int, int, int, int]], ...]:
        cfg = self._cfg
        tint = planet.tint_rgb(cfg.fallback_tint_boost)
        dark = tuple(int(int(c * cfg.fallback_darken) * cfg.fallback_darken) for c in tint)
        return (
            (0.0, cfg.fallback_highlight),
            (0.6, (*tint, 255)),
            (1.0, (*dark, 255)),
        )

    def draw_fallback_planet(
        self,
        surface: pygame.Surface,
        center: tuple[int, int],
        radius: int,
        planet: Planet,
    ) -> None:
        """Radial gradient stand-in used when a planet has no texture."""

        draw_radial_gradient_disc(
            surface,
            center,
            radius,
            self.fallback_stops(planet),
            focus_offset=(-radius / 3.0, -radius / 3.0),
            gradient_radius=radius * self._cfg.fallback_gradient_scale,
        )
        self.draw_planet_outline(surface, center, radius)

    def draw_stars(self, surface: pygame.Surface) -> None:
        surface.fill(RENDER_CFG.background_color)
        stars = self._textures.stars_surface()
        if stars is None:
            return
        width, height = surface.get_size()
        tile_w, tile_h = stars.get_size()
        for x in range(0, width, tile_w):
            for y in range(0, height, tile_h):
                surface.blit(stars, (x, y))


__all__ = [
    "SphereGrid",
    "SphereRenderer",
    "edge_alpha",
    "enhance_colors",
    "render_sphere_pixels",
    "sample_bilinear",
    "sphere_grid",
    "texture_coordinates",
]
