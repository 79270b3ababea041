import math

import numpy as np
import pygame
import pytest

from globe_viz.data.planets import PLANETS
from globe_viz.render.lighting import LightingModel
from globe_viz.render.sphere import (
    SphereRenderer,
    edge_alpha,
    enhance_colors,
    render_sphere_pixels,
    sample_bilinear,
    sphere_grid,
    texture_coordinates,
)

EARTH = PLANETS["earth"]
MARS = PLANETS["mars"]


def _squared_distance(radius):
    ys, xs = np.mgrid[0 : radius * 2, 0 : radius * 2]
    return ((xs - radius) / radius) ** 2 + ((ys - radius) / radius) ** 2


def test_disc_boundary_alpha(gradient_texture):
    radius = 24
    pixels = render_sphere_pixels(gradient_texture, radius, 0.4, LightingModel())
    d2 = _squared_distance(radius)
    alpha = pixels[..., 3]
    assert pixels.shape == (48, 48, 4)
    assert np.all(alpha[d2 > 1.0] == 0)
    assert np.all(alpha[d2 <= 1.0] >= int(255 * 0.7))
    assert alpha[radius, radius] == 255


def test_silhouette_alpha_is_floor():
    assert edge_alpha(np.array([1.0]))[0] == 178
    assert edge_alpha(np.array([0.0]))[0] == 255
    assert edge_alpha(np.array([0.25]))[0] == int(255 * (1 - 0.125))


def test_rotation_is_periodic(gradient_texture):
    lighting = LightingModel(light_angle=1.0)
    a = render_sphere_pixels(gradient_texture, 20, 0.7, lighting).astype(int)
    b = render_sphere_pixels(gradient_texture, 20, 0.7 + 2 * math.pi, lighting).astype(int)
    assert np.abs(a - b).max() <= 2


def test_rotation_changes_image(gradient_texture):
    lighting = LightingModel()
    a = render_sphere_pixels(gradient_texture, 20, 0.0, lighting)
    b = render_sphere_pixels(gradient_texture, 20, math.pi / 2, lighting)
    assert not np.array_equal(a, b)


def test_texture_wraps_horizontally(gradient_texture):
    v = np.array([0.3, 0.5, 1.0])
    left = sample_bilinear(gradient_texture, np.zeros(3), v)
    right = sample_bilinear(gradient_texture, np.ones(3), v)
    np.testing.assert_array_equal(left, right)


def test_bilinear_blends_four_texels():
    texture = np.array(
        [
            [[0, 0, 0], [100, 0, 0]],
            [[0, 100, 0], [100, 100, 200]],
        ],
        dtype=np.uint8,
    )
    sample = sample_bilinear(texture, np.array([0.25]), np.array([0.25]))
    assert sample.tolist() == [[50.0, 50.0, 50.0]]


def test_bilinear_clamps_vertically_and_wraps_horizontally():
    texture = np.array([[[10, 10, 10], [90, 90, 90]]], dtype=np.uint8)
    # x = 1.5 blends the last column with the first one
    sample = sample_bilinear(texture, np.array([0.75]), np.array([1.0]))
    assert sample.tolist() == [[50.0, 50.0, 50.0]]


@pytest.mark.parametrize("shape", [(1, 1, 3), (1, 7, 3), (5, 1, 3)])
def test_degenerate_textures_do_not_fault(shape):
    texture = np.full(shape, 77, dtype=np.uint8)
    u = np.linspace(0.0, 1.0, 11)
    v = np.linspace(0.0, 1.0, 11)
    samples = sample_bilinear(texture, u, v)
    assert samples.min() >= 76 and samples.max() <= 77
    pixels = render_sphere_pixels(texture, 6, 0.0, LightingModel())
    assert pixels[6, 6, 3] == 255


def test_texture_coordinates_wrap_and_clamp():
    u, v = texture_coordinates(
        np.array([-math.pi, math.pi / 2, 2 * math.pi]),
        np.array([math.pi / 2, 0.0, -math.pi / 2]),
    )
    assert u.tolist() == pytest.approx([0.0, 0.75, 0.5])
    assert v.tolist() == pytest.approx([0.0, 0.5, 1.0])


def test_enhance_colors():
    assert enhance_colors(np.array([0.0, 100.0, 250.0])).tolist() == [20.0, 140.0, 255.0]


def test_sphere_grid_is_cached_and_validated():
    assert sphere_grid(10) is sphere_grid(10)
    grid = sphere_grid(10)
    assert grid.mask.shape == (20, 20)
    assert grid.longitude.shape == grid.alpha.shape == (int(grid.mask.sum()),)
    with pytest.raises(ValueError):
        sphere_grid(0)


def test_light_side_is_brighter(gray_texture):
    radius = 50
    lighting = LightingModel(light_angle=math.pi)
    pixels = render_sphere_pixels(gray_texture, radius, 0.0, lighting).astype(float)
    premultiplied = pixels[..., :3].sum(axis=2) * pixels[..., 3] / 255.0
    center = premultiplied[radius, radius]
    left_edge = premultiplied[radius, 0]
    assert center < left_edge


def test_cache_reuses_raster_within_freshness(earth_store, fake_clock):
    renderer = SphereRenderer(earth_store, LightingModel())
    surface = pygame.Surface((200, 200))
    renderer.draw_planet(surface, (100, 100), 40, EARTH, 0.0)
    fake_clock.advance(0.010)
    renderer.draw_planet(surface, (100, 100), 40, EARTH, 0.003)
    assert renderer.rasters_built == 1
    fake_clock.advance(0.045)
    renderer.draw_planet(surface, (100, 100), 40, EARTH, 0.006)
    assert renderer.rasters_built == 2


def test_cache_misses_on_planet_or_size_change(earth_store, gray_texture):
    earth_store.set_texture(MARS, gray_texture)
    renderer = SphereRenderer(earth_store, LightingModel())
    surface = pygame.Surface((200, 200))
    renderer.draw_planet(surface, (100, 100), 40, EARTH, 0.0)
    renderer.draw_planet(surface, (100, 100), 40, MARS, 0.0)
    assert renderer.rasters_built == 2
    renderer.draw_planet(surface, (100, 100), 30, MARS, 0.0)
    assert renderer.rasters_built == 3


def test_cache_clear_forces_rebuild(earth_store):
    renderer = SphereRenderer(earth_store, LightingModel())
    surface = pygame.Surface((200, 200))
    renderer.draw_planet(surface, (100, 100), 40, EARTH, 0.0)
    earth_store.cache_clear()
    renderer.draw_planet(surface, (100, 100), 40, EARTH, 0.0)
    assert renderer.rasters_built == 2


def test_missing_texture_draws_fallback(store):
    renderer = SphereRenderer(store, LightingModel())
    surface = pygame.Surface((200, 200))
    renderer.draw_planet(surface, (100, 100), 50, PLANETS["neptune"], 0.0)
    assert renderer.rasters_built == 0
    assert store.cache_get() is None
    pixels = pygame.surfarray.array3d(surface)
    center = pixels[100, 100]
    lower_right = pixels[130, 130]
    assert center[1] >= 200 and center[2] >= 200
    assert int(center.sum()) > int(lower_right.sum())
    assert pixels[5, 5].sum() == 0


def test_fallback_stops_use_boosted_tint(store):
    renderer = SphereRenderer(store, LightingModel())
    stops = renderer.fallback_stops(PLANETS["neptune"])
    assert stops[0] == (0.0, (255, 255, 255, 200))
    offset, tint = stops[1]
    assert offset == 0.6
    assert tint[1:] == (255, 255, 255)
    assert 228 <= tint[0] <= 230
    offset, dark = stops[2]
    assert offset == 1.0
    assert dark[3] == 255
    assert all(abs(d - int(int(c * 0.7) * 0.7)) <= 1 for d, c in zip(dark[:3], tint[:3]))


def test_non_positive_radius_draws_nothing(earth_store):
    renderer = SphereRenderer(earth_store, LightingModel())
    surface = pygame.Surface((50, 50))
    renderer.draw_planet(surface, (25, 25), 0, EARTH, 0.0)
    assert renderer.rasters_built == 0
    assert pygame.surfarray.array3d(surface).max() == 0


def test_stars_tile_or_fill_black(store):
    renderer = SphereRenderer(store, LightingModel())
    surface = pygame.Surface((30, 20))
    surface.fill((255, 0, 0))
    renderer.draw_stars(surface)
    assert pygame.surfarray.array3d(surface).max() == 0

    stars = np.zeros((8, 8, 3), dtype=np.uint8)
    stars[0, 0] = (255, 255, 255)
    store.set_stars(stars)
    renderer.draw_stars(surface)
    pixels = pygame.surfarray.array3d(surface)
    assert tuple(pixels[0, 0]) == (255, 255, 255)
    assert tuple(pixels[8, 16]) == (255, 255, 255)
    assert tuple(pixels[1, 1]) == (0, 0, 0)


def test_bilinear_ignores_extra_channels():
    texture = np.zeros((4, 8, 4), dtype=np.uint8)
    texture[..., :3] = 60
    texture[..., 3] = 255
    sample = sample_bilinear(texture, np.array([0.1, 0.9]), np.array([0.2, 0.8]))
    assert sample.shape == (2, 3)
    assert sample.min() >= 59 and sample.max() <= 60
