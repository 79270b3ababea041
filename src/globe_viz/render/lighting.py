"""Directional lighting: shading scalar, light glyph and day/night terminator."""
from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np
import pygame

from globe_viz.core.config import LIGHTING_CFG, LightingCfg

from .draw import draw_line_segments_alpha, draw_polyline_alpha, draw_radial_gradient_disc


def pack_argb(alpha: int, red: int, green: int, blue: int) -> int:
    return (alpha << 24) | (red << 16) | (green << 8) | blue


def unpack_argb(color: int) -> tuple[int, int, int, int]:
    return (color >> 24) & 0xFF, (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


@dataclass
class LightingModel:
    """Mutable lighting state plus the Lambert shading it implies.

    The light sits in the view plane at ``light_angle`` and is pushed slightly
    toward the viewer (``light_z``); intensity is a 25% ambient floor plus 75%
    of the clamped Lambert term.
    """

    show_light_source: bool = True
    show_terminator: bool = True
    light_angle: float = LIGHTING_CFG.default_angle
    cfg: LightingCfg = LIGHTING_CFG

    def reset(self) -> None:
        self.show_light_source = True
        self.show_terminator = True
        self.light_angle = self.cfg.default_angle

    def light_direction(self) -> tuple[float, float, float]:
        lx = math.cos(self.light_angle)
        ly = math.sin(self.light_angle)
        lz = self.cfg.light_z
        length = math.sqrt(lx * lx + ly * ly + lz * lz)
        return lx / length, ly / length, lz / length

    def intensity(self, longitude, latitude):
        """Shading multiplier in [ambient, 1] for a surface point.

        Accepts floats or numpy arrays of matching shape.
        """

        lx, ly, lz = self.light_direction()
        cos_lat = np.cos(latitude)
        dot = (
            cos_lat * np.cos(longitude) * lx
            - np.sin(latitude) * ly
            + cos_lat * np.sin(longitude) * lz
        )
        ambient = self.cfg.ambient
        lit = np.maximum(ambient, np.maximum(0.0, dot) * self.cfg.directional + ambient)
        if np.ndim(lit) == 0:
            return float(lit)
        return lit

    @staticmethod
    def apply_lighting(color: int, intensity: float) -> int:
        alpha, red, green, blue = unpack_argb(color)
        red = int(min(255, red * intensity))
        green = int(min(255, green * intensity))
        blue = int(min(255, blue * intensity))
        return pack_argb(alpha, red, green, blue)

    @staticmethod
    def shade_rgb(rgb: np.ndarray, intensity: np.ndarray) -> np.ndarray:
        """Vectorised :meth:`apply_lighting` for an ``(..., 3)`` color array."""

        return np.minimum(255.0, np.floor(rgb * intensity[..., np.newaxis]))

    def light_position(self, center: tuple[int, int], radius: int) -> tuple[int, int]:
        distance = radius + self.cfg.light_distance_offset
        return (
            int(center[0] + math.cos(self.light_angle) * distance),
            int(center[1] + math.sin(self.light_angle) * distance),
        )

    def ray_segments(
        self, position: tuple[int, int], clock: float
    ) -> list[tuple[tuple[int, int], tuple[int, int]]]:
        cfg = self.cfg
        lx, ly = position
        segments = []
        for i in range(cfg.ray_count):
            ray_angle = (clock + i * 2.0 * math.pi / cfg.ray_count) % (2.0 * math.pi)
            length = cfg.ray_base_length + int(cfg.ray_pulse * math.sin(clock * 3 + i))
            inner = cfg.ray_inner_radius
            segments.append(
                (
                    (int(lx + math.cos(ray_angle) * inner), int(ly + math.sin(ray_angle) * inner)),
                    (
                        int(lx + math.cos(ray_angle) * (inner + length)),
                        int(ly + math.sin(ray_angle) * (inner + length)),
                    ),
                )
            )
        return segments

    def draw_light_source(
        self,
        surface: pygame.Surface,
        center: tuple[int, int],
        radius: int,
        clock: float,
    ) -> None:
        if not self.show_light_source:
            return
        position = self.light_position(center, radius)
        draw_radial_gradient_disc(surface, position, self.cfg.glyph_radius, self.cfg.glyph_stops)
        draw_line_segments_alpha(
            surface, self.cfg.ray_color, self.ray_segments(position, clock), self.cfg.ray_width
        )

    def terminator_points(self, center: tuple[int, int], radius: int) -> list[tuple[int, int]]:
        """Rim points whose view-plane normal is nearly perpendicular to the light."""

        lx, ly, _ = self.light_direction()
        angles = np.arange(0.0, 2.0 * math.pi, self.cfg.terminator_step)
        xs = np.cos(angles)
        ys = np.sin(angles)
        # rim normal is (x, -y, 0)
        dots = xs * lx - ys * ly
        near = np.abs(dots) < self.cfg.terminator_threshold
        cx, cy = center
        return [
            (int(cx + x * radius), int(cy + y * radius))
            for x, y in zip(xs[near], ys[near])
        ]

    def draw_terminator(self, surface: pygame.Surface, center: tuple[int, int], radius: int) -> None:
        if not self.show_terminator:
            return
        draw_polyline_alpha(
            surface,
            self.cfg.terminator_color,
            self.terminator_points(center, radius),
            self.cfg.terminator_width,
        )


__all__ = ["LightingModel", "pack_argb", "unpack_argb"]
