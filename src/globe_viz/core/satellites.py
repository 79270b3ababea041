"""Factory helpers producing randomised satellite swarms."""
from __future__ import annotations

import random

from .config import SATELLITE_CFG, SatelliteCfg
from .model import TWO_PI, Satellite


def clamp_satellite_count(count: int, cfg: SatelliteCfg = SATELLITE_CFG) -> int:
    return max(0, min(int(count), cfg.max_count))


def create_satellites(
    count: int,
    min_radius: float,
    max_radius: float,
    *,
    rng: random.Random | None = None,
    cfg: SatelliteCfg = SATELLITE_CFG,
) -> list[Satellite]:
    """Create ``count`` satellites with random angle, radius, speed, size and color."""

    rng = rng or random.Random()
    satellites: list[Satellite] = []
    for _ in range(max(0, count)):
        satellites.append(
            Satellite(
                angle=rng.random() * TWO_PI,
                orbit_radius=min_radius + rng.random() * (max_radius - min_radius),
                speed=cfg.min_speed + rng.random() * (cfg.max_speed - cfg.min_speed),
                color=rng.choice(cfg.palette),
                size=rng.randint(cfg.min_size, cfg.max_size),
            )
        )
    return satellites


def create_satellites_around(
    count: int,
    base_radius: float = SATELLITE_CFG.base_orbit_radius,
    *,
    rng: random.Random | None = None,
    cfg: SatelliteCfg = SATELLITE_CFG,
) -> list[Satellite]:
    return create_satellites(
        count,
        base_radius + cfg.min_radius_offset,
        base_radius + cfg.max_radius_offset,
        rng=rng,
        cfg=cfg,
    )


__all__ = ["clamp_satellite_count", "create_satellites", "create_satellites_around"]
