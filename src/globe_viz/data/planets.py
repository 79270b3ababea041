"""Static catalog of the planets that can be shown on the globe."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Planet:
    key: str
    name: str
    texture_file: str
    reflectivity: float
    tint: tuple[float, float, float]

    def tint_rgb(self, boost: float = 1.5) -> tuple[int, int, int]:
        """Fallback tint as 0-255 RGB, brightened by ``boost`` and clamped."""

        r, g, b = self.tint
        return (
            min(255, int(r * 255 * boost)),
            min(255, int(g * 255 * boost)),
            min(255, int(b * 255 * boost)),
        )


PLANET_DEFINITIONS: tuple[Planet, ...] = (
    Planet(
        key="earth",
        name="Earth",
        texture_file="earth_daymap.jpg",
        reflectivity=1.0,
        tint=(0.8, 0.6, 0.4),
    ),
    Planet(
        key="mars",
        name="Mars",
        texture_file="mars.jpg",
        reflectivity=0.8,
        tint=(0.4, 0.2, 0.0),
    ),
    Planet(
        key="jupiter",
        name="Jupiter",
        texture_file="jupiter.jpg",
        reflectivity=1.2,
        tint=(1.0, 0.8, 0.6),
    ),
    Planet(
        key="venus",
        name="Venus",
        texture_file="venus.jpg",
        reflectivity=0.9,
        tint=(0.7, 0.5, 0.3),
    ),
    Planet(
        key="mercury",
        name="Mercury",
        texture_file="mercury.jpg",
        reflectivity=0.7,
        tint=(0.5, 0.3, 0.1),
    ),
    Planet(
        key="saturn",
        name="Saturn",
        texture_file="saturn.jpg",
        reflectivity=1.1,
        tint=(0.9, 0.7, 0.5),
    ),
    Planet(
        key="neptune",
        name="Neptune",
        texture_file="neptune.jpg",
        reflectivity=1.0,
        tint=(0.6, 0.8, 0.9),
    ),
)

PLANETS: dict[str, Planet] = {planet.key: planet for planet in PLANET_DEFINITIONS}
PLANETS_BY_NAME: dict[str, Planet] = {planet.name: planet for planet in PLANET_DEFINITIONS}
DEFAULT_PLANET_KEY = "earth"
DEFAULT_PLANET = PLANETS[DEFAULT_PLANET_KEY]


def planet_from_name(name: str) -> Planet:
    """Look a planet up by display name, falling back to Earth."""

    return PLANETS_BY_NAME.get(name, DEFAULT_PLANET)


def resolve_planet(value: Planet | str | None) -> Planet:
    """Accept a planet, a catalog key or a display name.

    Unknown values resolve to the default planet instead of raising.
    """

    if isinstance(value, Planet):
        return value
    if not value:
        return DEFAULT_PLANET
    planet = PLANETS.get(value)
    if planet is not None:
        return planet
    planet = PLANETS_BY_NAME.get(value)
    if planet is not None:
        return planet
    return PLANETS.get(value.strip().lower(), DEFAULT_PLANET)


def planet_display_names() -> list[str]:
    return [planet.name for planet in PLANET_DEFINITIONS]


__all__ = [
    "DEFAULT_PLANET",
    "DEFAULT_PLANET_KEY",
    "PLANET_DEFINITIONS",
    "PLANETS",
    "PLANETS_BY_NAME",
    "Planet",
    "planet_display_names",
    "planet_from_name",
    "resolve_planet",
]
