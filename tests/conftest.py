from __future__ import annotations

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import numpy as np
import pygame
import pytest

from globe_viz.data.planets import PLANETS
from globe_viz.render.textures import TextureStore


class FakeClock:
    """Manually advanced stand-in for :func:`time.perf_counter`."""

    def __init__(self, start: float = 100.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture(scope="session", autouse=True)
def pygame_session():
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def gray_texture() -> np.ndarray:
    return np.full((32, 64, 3), 128, dtype=np.uint8)


@pytest.fixture
def gradient_texture() -> np.ndarray:
    height, width = 48, 96
    xs = np.linspace(0.0, 2.0 * np.pi, width, endpoint=False)
    ys = np.linspace(0.0, 1.0, height)
    red = 127.5 + 127.5 * np.sin(xs)[np.newaxis, :] * np.ones((height, 1))
    green = 255.0 * ys[:, np.newaxis] * np.ones((1, width))
    blue = 127.5 + 127.5 * np.cos(xs)[np.newaxis, :] * np.ones((height, 1))
    return np.dstack([red, green, blue]).astype(np.uint8)


@pytest.fixture
def store(tmp_path, fake_clock) -> TextureStore:
    return TextureStore(tmp_path, clock=fake_clock)


@pytest.fixture
def earth_store(store, gray_texture) -> TextureStore:
    store.set_texture(PLANETS["earth"], gray_texture)
    return store
