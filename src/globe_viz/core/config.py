"""Configuration dataclasses for the globe visualization."""
from __future__ import annotations

import math
from dataclasses import dataclass, field


@dataclass(frozen=True)
class AnimationCfg:
    clock_step: float = 0.02
    rotation_step: float = 0.003
    default_speed: float = 1.0
    min_speed: float = 0.1
    max_speed: float = 5.0
    drag_sensitivity: float = 0.01


@dataclass(frozen=True)
class LightingCfg:
    default_angle: float = math.pi / 4
    light_z: float = 0.5
    ambient: float = 0.25
    directional: float = 0.75
    light_distance_offset: int = 80
    glyph_radius: int = 15
    glyph_stops: tuple[tuple[float, tuple[int, int, int, int]], ...] = (
        (0.0, (255, 255, 200, 200)),
        (0.7, (255, 255, 100, 100)),
        (1.0, (255, 255, 0, 0)),
    )
    ray_count: int = 8
    ray_inner_radius: int = 20
    ray_base_length: int = 25
    ray_pulse: float = 5.0
    ray_color: tuple[int, int, int, int] = (255, 255, 150, 80)
    ray_width: int = 2
    terminator_step: float = 0.05
    terminator_threshold: float = 0.1
    terminator_color: tuple[int, int, int, int] = (255, 255, 0, 150)
    terminator_width: int = 2


@dataclass(frozen=True)
class SphereCfg:
    cache_freshness: float = 0.05
    enhance_gain: float = 1.2
    enhance_offset: float = 20.0
    edge_alpha_floor: float = 0.7
    outline_color: tuple[int, int, int, int] = (100, 100, 100, 150)
    outline_width: int = 2
    fallback_tint_boost: float = 1.5
    fallback_highlight: tuple[int, int, int, int] = (255, 255, 255, 200)
    fallback_darken: float = 0.7
    fallback_gradient_scale: float = 1.2


@dataclass(frozen=True)
class SatelliteCfg:
    default_count: int = 8
    max_count: int = 20
    base_orbit_radius: int = 150
    min_radius_offset: int = 20
    max_radius_offset: int = 80
    min_speed: float = 0.01
    max_speed: float = 0.03
    min_size: int = 3
    max_size: int = 6
    halo_alpha: int = 50
    orbit_color: tuple[int, int, int, int] = (100, 100, 100, 100)
    orbit_dash: tuple[int, int] = (2, 4)
    palette: tuple[tuple[int, int, int], ...] = field(
        default_factory=lambda: (
            (255, 255, 255),
            (0, 255, 255),
            (255, 255, 0),
            (255, 200, 0),
            (255, 175, 175),
            (192, 192, 192),
            (0, 255, 0),
            (255, 0, 255),
        )
    )


@dataclass(frozen=True)
class RenderCfg:
    background_color: tuple[int, int, int] = (0, 0, 0)
    hud_text_color: tuple[int, int, int] = (255, 255, 255)
    hud_font_names: tuple[str, ...] = ("arial", "helvetica", "dejavusans")
    hud_font_size: int = 16
    hud_hint_font_size: int = 12
    hud_origin: tuple[int, int] = (10, 30)
    hud_line_spacing: int = 20
    hud_hint_margin: int = 20
    fps_text_alpha: int = int(255 * 0.6)
    sphere_radius_divisor: int = 4


@dataclass(frozen=True)
class WindowCfg:
    title: str = "Globe 2D Visualization"
    size: tuple[int, int] = (1000, 700)
    control_panel_width: int = 200
    target_fps: int = 60
    panel_background: tuple[int, int, int] = (64, 64, 64)
    panel_text_color: tuple[int, int, int] = (255, 255, 255)
    widget_color: tuple[int, int, int] = (128, 128, 128)
    widget_hover_color: tuple[int, int, int] = (160, 160, 160)
    widget_accent_color: tuple[int, int, int] = (88, 140, 255)
    widget_radius: int = 6


ANIMATION_CFG = AnimationCfg()
LIGHTING_CFG = LightingCfg()
SPHERE_CFG = SphereCfg()
SATELLITE_CFG = SatelliteCfg()
RENDER_CFG = RenderCfg()
WINDOW_CFG = WindowCfg()


__all__ = [
    "ANIMATION_CFG",
    "LIGHTING_CFG",
    "RENDER_CFG",
    "SATELLITE_CFG",
    "SPHERE_CFG",
    "WINDOW_CFG",
    "AnimationCfg",
    "LightingCfg",
    "RenderCfg",
    "SatelliteCfg",
    "SphereCfg",
    "WindowCfg",
]
