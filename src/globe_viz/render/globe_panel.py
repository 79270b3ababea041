"""Per-frame composition of the globe scene and the controls that drive it."""
from __future__ import annotations

import random

import pygame

from globe_viz.core.config import ANIMATION_CFG, RENDER_CFG, SATELLITE_CFG
from globe_viz.core.model import AnimationState, Satellite
from globe_viz.core.satellites import clamp_satellite_count, create_satellites_around
from globe_viz.core.timekeeping import FpsMeter, FrameTimer
from globe_viz.data.planets import DEFAULT_PLANET, Planet, resolve_planet

from .assets import get_text_surface, load_font
from .draw import draw_orbit_ring, draw_satellite
from .lighting import LightingModel
from .sphere import SphereRenderer
from .textures import TextureStore


class GlobePanel:
    """Owns the animation, satellites and current planet; renders one frame per call.

    Every setter that changes how the sphere looks clears the store's sphere
    cache so the next frame re-projects the texture.
    """

    def __init__(
        self,
        textures: TextureStore,
        *,
        size: tuple[int, int] = (800, 700),
        lighting: LightingModel | None = None,
        rng: random.Random | None = None,
        show_fps: bool = False,
    ) -> None:
        self._textures = textures
        self._lighting = lighting or LightingModel()
        self._renderer = SphereRenderer(textures, self._lighting)
        self._rng = rng or random.Random()
        self._size = size
        self.animation = AnimationState()
        self.planet: Planet = DEFAULT_PLANET
        self.show_orbits = True
        self.satellite_count = SATELLITE_CFG.default_count
        self.satellites: list[Satellite] = self._spawn_satellites(self.satellite_count)
        self.show_fps = show_fps
        self._frame_timer = FrameTimer()
        self._fps = FpsMeter()
        self._font: pygame.font.Font | None = None
        self._hint_font: pygame.font.Font | None = None

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    @property
    def textures(self) -> TextureStore:
        return self._textures

    @property
    def lighting(self) -> LightingModel:
        return self._lighting

    @property
    def renderer(self) -> SphereRenderer:
        return self._renderer

    @property
    def size(self) -> tuple[int, int]:
        return self._size

    @property
    def rotation(self) -> float:
        return self.animation.rotation

    @property
    def animation_speed(self) -> float:
        return self.animation.speed

    def textures_loaded(self) -> bool:
        return self._textures.all_loaded()

    def layout(self) -> tuple[tuple[int, int], int]:
        width, height = self._size
        radius = min(width, height) // RENDER_CFG.sphere_radius_divisor
        return (width // 2, height // 2), radius

    # ------------------------------------------------------------------
    # Controls
    # ------------------------------------------------------------------
    def set_animation_speed(self, speed: float) -> None:
        self.animation.speed = max(ANIMATION_CFG.min_speed, min(float(speed), ANIMATION_CFG.max_speed))

    def set_satellite_count(self, count: int) -> None:
        self.satellite_count = clamp_satellite_count(count)
        self.satellites = self._spawn_satellites(self.satellite_count)

    def set_planet(self, planet: Planet | str) -> None:
        planet = resolve_planet(planet)
        if planet is not self.planet:
            self.planet = planet
            self._textures.cache_clear()

    def set_show_orbits(self, show: bool) -> None:
        self.show_orbits = bool(show)

    def set_show_light_source(self, show: bool) -> None:
        self._lighting.show_light_source = bool(show)
        self._textures.cache_clear()

    def set_show_terminator(self, show: bool) -> None:
        self._lighting.show_terminator = bool(show)

    def set_light_angle(self, angle: float) -> None:
        self._lighting.light_angle = float(angle)
        self._textures.cache_clear()

    def reset(self) -> None:
        self.animation.reset()
        self.planet = DEFAULT_PLANET
        self.show_orbits = True
        self.satellite_count = SATELLITE_CFG.default_count
        self.satellites = self._spawn_satellites(self.satellite_count)
        self._lighting.reset()
        self._textures.cache_clear()

    def on_mouse_drag(self, position: tuple[int, int]) -> None:
        """Spin the globe by the pointer's horizontal offset from the panel center."""

        dx = position[0] - self._size[0] // 2
        self.animation.rotation += dx * ANIMATION_CFG.drag_sensitivity
        self._textures.cache_clear()

    def resize(self, size: tuple[int, int]) -> None:
        if size != self._size:
            self._size = size
            self._textures.cache_clear()

    def _spawn_satellites(self, count: int) -> list[Satellite]:
        return create_satellites_around(count, SATELLITE_CFG.base_orbit_radius, rng=self._rng)

    # ------------------------------------------------------------------
    # Frame
    # ------------------------------------------------------------------
    def advance(self) -> None:
        self.animation.advance()

    def render(self, surface: pygame.Surface) -> None:
        self.resize(surface.get_size())
        self._fps.record(self._frame_timer.tick())
        self.advance()
        center, radius = self.layout()

        self._renderer.draw_stars(surface)
        if self.show_orbits:
            self.draw_orbits(surface, center)
        self.update_and_draw_satellites(surface, center)
        self._renderer.draw_planet(surface, center, radius, self.planet, self.animation.rotation)
        self._lighting.draw_light_source(surface, center, radius, self.animation.clock)
        self._lighting.draw_terminator(surface, center, radius)
        self.draw_hud(surface)

    def draw_orbits(self, surface: pygame.Surface, center: tuple[int, int]) -> None:
        if not self.satellites:
            return
        layer = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        for satellite in self.satellites:
            draw_orbit_ring(
                layer,
                center,
                satellite.orbit_radius,
                color=SATELLITE_CFG.orbit_color,
                dash=SATELLITE_CFG.orbit_dash,
            )
        surface.blit(layer, (0, 0))

    def update_and_draw_satellites(self, surface: pygame.Surface, center: tuple[int, int]) -> None:
        dt = self.animation.frame_dt()
        for satellite in self.satellites:
            satellite.update(dt)
            draw_satellite(
                surface,
                satellite.position(center),
                satellite.size,
                color=satellite.color,
                halo_alpha=SATELLITE_CFG.halo_alpha,
            )

    def hud_lines(self) -> list[str]:
        return [
            f"Planet: {self.planet.name}",
            f"Satellites: {len(self.satellites)}",
            f"Speed: {self.animation.speed:.1f}x",
        ]

    def draw_hud(self, surface: pygame.Surface) -> None:
        if not pygame.font.get_init():
            return
        if self._font is None:
            self._font = load_font(RENDER_CFG.hud_font_names, RENDER_CFG.hud_font_size, bold=True)
            self._hint_font = load_font(RENDER_CFG.hud_font_names, RENDER_CFG.hud_hint_font_size)
        color = RENDER_CFG.hud_text_color
        x, y = RENDER_CFG.hud_origin
        for idx, text in enumerate(self.hud_lines()):
            line = get_text_surface(self._font, text, color)
            # origin is the text baseline
            surface.blit(line, (x, y + idx * RENDER_CFG.hud_line_spacing - self._font.get_ascent()))

        hint = get_text_surface(self._hint_font, "Drag the mouse to control rotation", color)
        surface.blit(hint, (x, surface.get_height() - RENDER_CFG.hud_hint_margin - hint.get_height() // 2))

        if self.show_fps:
            fps_surf = get_text_surface(self._hint_font, f"{self._fps.fps:5.1f} FPS", color).copy()
            fps_surf.set_alpha(RENDER_CFG.fps_text_alpha)
            surface.blit(fps_surf, fps_surf.get_rect(topright=(surface.get_width() - x, x)))


__all__ = ["GlobePanel"]
