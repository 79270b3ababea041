from __future__ import annotations

import math
from typing import Sequence

import numpy as np
import pygame

from .assets import Color, rgba_to_surface

GradientStops = Sequence[tuple[float, tuple[int, int, int, int]]]


def radial_gradient_pixels(
    diameter: int,
    focus: tuple[float, float],
    gradient_radius: float,
    stops: GradientStops,
) -> np.ndarray:
    """Fill a disc of ``diameter`` with a radial gradient around ``focus``.

    ``focus`` is in the disc's local pixel coordinates. Beyond
    ``gradient_radius`` the last stop color is used. Pixels outside the disc
    are fully transparent. Returns a ``(diameter, diameter, 4)`` uint8 array.
    """

    out = np.zeros((diameter, diameter, 4), dtype=np.uint8)
    if diameter <= 0 or gradient_radius <= 0.0:
        return out
    coords = np.arange(diameter, dtype=np.float64) + 0.5
    px = coords[np.newaxis, :]
    py = coords[:, np.newaxis]
    half = diameter / 2.0
    inside = (px - half) ** 2 + (py - half) ** 2 <= half * half
    t = np.clip(np.hypot(px - focus[0], py - focus[1]) / gradient_radius, 0.0, 1.0)
    positions = [position for position, _ in stops]
    for channel in range(4):
        values = [color[channel] for _, color in stops]
        out[..., channel] = np.interp(t, positions, values).astype(np.uint8)
    out[~inside] = 0
    return out


def draw_radial_gradient_disc(
    surface: pygame.Surface,
    center: tuple[int, int],
    radius: int,
    stops: GradientStops,
    *,
    focus_offset: tuple[float, float] = (0.0, 0.0),
    gradient_radius: float | None = None,
) -> None:
    if radius <= 0:
        return
    diameter = radius * 2
    focus = (radius + focus_offset[0], radius + focus_offset[1])
    pixels = radial_gradient_pixels(diameter, focus, gradient_radius or radius, stops)
    disc = rgba_to_surface(pixels)
    surface.blit(disc, (center[0] - radius, center[1] - radius))


def draw_polyline_alpha(
    surface: pygame.Surface,
    color: Color,
    points: Sequence[tuple[int, int]],
    width: int,
) -> None:
    if len(points) < 2:
        return
    xs = [x for x, _ in points]
    ys = [y for _, y in points]
    pad = width + 1
    left, top = min(xs) - pad, min(ys) - pad
    layer = pygame.Surface((max(xs) - left + pad + 1, max(ys) - top + pad + 1), pygame.SRCALPHA)
    shifted = [(x - left, y - top) for x, y in points]
    pygame.draw.lines(layer, color, False, shifted, width)
    surface.blit(layer, (left, top))


def draw_line_segments_alpha(
    surface: pygame.Surface,
    color: Color,
    segments: Sequence[tuple[tuple[int, int], tuple[int, int]]],
    width: int,
) -> None:
    if not segments:
        return
    xs = [x for start, end in segments for x in (start[0], end[0])]
    ys = [y for start, end in segments for y in (start[1], end[1])]
    pad = width + 1
    left, top = min(xs) - pad, min(ys) - pad
    layer = pygame.Surface((max(xs) - left + pad + 1, max(ys) - top + pad + 1), pygame.SRCALPHA)
    for start, end in segments:
        pygame.draw.line(
            layer,
            color,
            (start[0] - left, start[1] - top),
            (end[0] - left, end[1] - top),
            width,
        )
    surface.blit(layer, (left, top))


def draw_circle_outline_alpha(
    surface: pygame.Surface,
    color: Color,
    center: tuple[int, int],
    radius: int,
    width: int,
) -> None:
    if radius <= 0:
        return
    extent = radius + width
    layer = pygame.Surface((extent * 2 + 1, extent * 2 + 1), pygame.SRCALPHA)
    pygame.draw.circle(layer, color, (extent, extent), radius, width)
    surface.blit(layer, (center[0] - extent, center[1] - extent))


def draw_satellite(
    surface: pygame.Surface,
    position: tuple[int, int],
    size: int,
    *,
    color: tuple[int, int, int],
    halo_alpha: int,
) -> None:
    if size <= 0:
        return
    pygame.draw.circle(surface, color, position, max(1, size // 2))
    halo = pygame.Surface((size * 2, size * 2), pygame.SRCALPHA)
    pygame.draw.circle(halo, (*color, halo_alpha), (size, size), size)
    surface.blit(halo, halo.get_rect(center=position))


def dashed_circle_segments(
    center: tuple[int, int],
    radius: float,
    dash: tuple[int, int],
) -> list[tuple[tuple[int, int], tuple[int, int]]]:
    """Split a circle into ``dash[0]`` px strokes separated by ``dash[1]`` px gaps."""

    if radius <= 0.0:
        return []
    on, off = dash
    period = on + off
    circumference = 2.0 * math.pi * radius
    cx, cy = center
    segments = []
    for start in np.arange(0.0, circumference, period):
        a0 = start / radius
        a1 = min(start + on, circumference) / radius
        segments.append(
            (
                (int(round(cx + math.cos(a0) * radius)), int(round(cy + math.sin(a0) * radius))),
                (int(round(cx + math.cos(a1) * radius)), int(round(cy + math.sin(a1) * radius))),
            )
        )
    return segments


def draw_orbit_ring(
    surface: pygame.Surface,
    center: tuple[int, int],
    radius: float,
    *,
    color: Color,
    dash: tuple[int, int],
) -> None:
    """Dashed 1 px orbit ring; ``surface`` should carry per-pixel alpha."""

    for start, end in dashed_circle_segments(center, radius, dash):
        pygame.draw.line(surface, color, start, end, 1)


__all__ = [
    "GradientStops",
    "dashed_circle_segments",
    "draw_circle_outline_alpha",
    "draw_line_segments_alpha",
    "draw_orbit_ring",
    "draw_polyline_alpha",
    "draw_radial_gradient_disc",
    "draw_satellite",
    "radial_gradient_pixels",
]
