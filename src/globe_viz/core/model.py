"""Data models for the globe animation state."""
from __future__ import annotations

import math
from dataclasses import dataclass

from .config import ANIMATION_CFG, AnimationCfg

TWO_PI = 2.0 * math.pi


@dataclass
class Satellite:
    """Point satellite on a circular orbit around the globe center."""

    angle: float
    orbit_radius: float
    speed: float
    color: tuple[int, int, int]
    size: int

    def update(self, dt: float) -> None:
        self.angle = (self.angle + self.speed * dt) % TWO_PI

    def position(self, center: tuple[int, int]) -> tuple[int, int]:
        cx, cy = center
        return (
            int(cx + math.cos(self.angle) * self.orbit_radius),
            int(cy + math.sin(self.angle) * self.orbit_radius),
        )


@dataclass
class AnimationState:
    """Animation clock, globe rotation and speed multiplier."""

    clock: float = 0.0
    rotation: float = 0.0
    speed: float = ANIMATION_CFG.default_speed

    def frame_dt(self, cfg: AnimationCfg = ANIMATION_CFG) -> float:
        return cfg.clock_step * self.speed

    def advance(self, cfg: AnimationCfg = ANIMATION_CFG) -> None:
        self.clock += cfg.clock_step * self.speed
        self.rotation += cfg.rotation_step * self.speed

    def reset(self, cfg: AnimationCfg = ANIMATION_CFG) -> None:
        self.clock = 0.0
        self.rotation = 0.0
        self.speed = cfg.default_speed


__all__ = ["AnimationState", "Satellite", "TWO_PI"]
