import math
import random

import pygame
import pytest

from globe_viz.core.config import ANIMATION_CFG, SATELLITE_CFG
from globe_viz.render.globe_panel import GlobePanel
from globe_viz.render.ui import Button, Checkbox, ControlPanel, PlanetSelector, Slider, build_text_panel


def _click(pos, button=1):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=button, pos=pos)


def _release(pos, button=1):
    return pygame.event.Event(pygame.MOUSEBUTTONUP, button=button, pos=pos)


def _motion(pos):
    return pygame.event.Event(pygame.MOUSEMOTION, pos=pos, rel=(0, 0), buttons=(1, 0, 0))


def _at_fraction(rect, fraction):
    return (rect.left + int(rect.width * fraction), rect.centery)


@pytest.fixture
def globe(earth_store):
    return GlobePanel(earth_store, size=(400, 400), rng=random.Random(3))


@pytest.fixture
def panel(globe):
    return ControlPanel(globe, (400, 0, 200, 700))


def test_slider_snaps_and_clamps():
    seen = []
    slider = Slider((0, 0, 100, 10), "Speed", 0.1, 5.0, 1.04, seen.append, step=0.1)
    assert slider.value == 1.0
    slider.set_value(7.0)
    assert slider.value == 5.0
    assert seen == []
    slider.set_value(-1.0, notify=True)
    assert seen == [0.1]
    slider.set_value(0.1, notify=True)
    assert seen == [0.1]


def test_slider_rejects_empty_range():
    with pytest.raises(ValueError):
        Slider((0, 0, 10, 10), "Bad", 1.0, 1.0, 1.0, lambda v: None)


def test_slider_drag_reports_values():
    seen = []
    slider = Slider((0, 0, 100, 10), "Angle", 0, 360, 0, seen.append)
    assert slider.handle_event(_click((50, 5)))
    assert slider.handle_event(_motion((75, 5)))
    assert slider.handle_event(_release((75, 5)))
    assert seen == [180, 270]
    assert not slider.handle_event(_motion((10, 5)))
    assert not slider.handle_event(_click((50, 40)))


def test_checkbox_toggles():
    seen = []
    box = Checkbox((0, 0, 50, 20), "Show", True, seen.append)
    assert box.handle_event(_click((5, 5)))
    assert box.handle_event(_click((5, 5)))
    assert seen == [False, True]
    assert not box.handle_event(_click((5, 5), button=3))


def test_button_invokes_callback():
    calls = []
    button = Button((0, 0, 40, 20), "Go", lambda: calls.append(1))
    assert not button.handle_event(_click((100, 100)))
    assert button.handle_event(_click((10, 10)))
    assert calls == [1]


def test_planet_selector_cycles_both_ways():
    seen = []
    selector = PlanetSelector((0, 0, 120, 40), ["Earth", "Mars", "Venus"], "Earth", seen.append)
    selector.handle_event(_click((5, 20)))
    assert selector.selected == "Venus"
    selector.handle_event(_click((80, 20)))
    selector.handle_event(_click((80, 20)))
    assert selector.selected == "Mars"
    assert seen == ["Venus", "Earth", "Mars"]
    selector.select("Pluto", notify=True)
    assert selector.selected == "Mars"
    assert seen == ["Venus", "Earth", "Mars"]


def test_planet_selector_requires_names():
    with pytest.raises(ValueError):
        PlanetSelector((0, 0, 10, 10), [], "Earth", lambda name: None)


def test_control_panel_drives_globe(panel, globe):
    panel.handle_event(_click(_at_fraction(panel.speed_slider.rect, 0.25)))
    panel.handle_event(_release((0, 0)))
    assert globe.animation_speed == pytest.approx(1.3)

    panel.handle_event(_click(_at_fraction(panel.satellite_slider.rect, 0.99)))
    panel.handle_event(_release((0, 0)))
    assert len(globe.satellites) == SATELLITE_CFG.max_count

    selector = panel.planet_selector.rect
    panel.handle_event(_click((selector.left + 5, selector.centery)))
    assert globe.planet.name == "Neptune"

    panel.handle_event(_click(panel.orbit_checkbox.rect.center))
    assert not globe.show_orbits
    panel.handle_event(_click(panel.light_checkbox.rect.center))
    assert not globe.lighting.show_light_source
    panel.handle_event(_click(panel.terminator_checkbox.rect.center))
    assert not globe.lighting.show_terminator

    panel.handle_event(_click(_at_fraction(panel.light_slider.rect, 0.5)))
    panel.handle_event(_release((0, 0)))
    assert globe.lighting.light_angle == pytest.approx(math.pi)


def test_reset_button_syncs_widgets_and_globe(panel, globe):
    globe.set_animation_speed(4.0)
    panel.speed_slider.set_value(4.0)
    panel.orbit_checkbox.handle_event(_click(panel.orbit_checkbox.rect.center))
    panel.planet_selector.cycle(2)

    assert panel.handle_event(_click(panel.reset_button.rect.center))
    assert panel.speed_slider.value == ANIMATION_CFG.default_speed
    assert panel.orbit_checkbox.checked
    assert panel.planet_selector.selected == "Earth"
    assert panel.light_slider.value == 45
    assert globe.animation_speed == ANIMATION_CFG.default_speed
    assert globe.show_orbits
    assert globe.planet.name == "Earth"


def test_events_outside_panel_are_ignored(panel):
    assert not panel.handle_event(_click((50, 50)))
    assert not panel.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a))


def test_panel_draws(panel):
    screen = pygame.Surface((600, 700))
    font = pygame.font.Font(None, 14)
    panel.draw(screen, font)
    assert tuple(pygame.surfarray.array3d(screen)[599, 699]) == (64, 64, 64)


def test_text_panel_size():
    font = pygame.font.Font(None, 14)
    surface = build_text_panel(font, [("one", (255, 255, 255)), ("", (0, 0, 0))], background_color=(0, 0, 0, 128))
    assert surface.get_height() == font.get_linesize() * 2 + 28
    with pytest.raises(ValueError):
        build_text_panel(font, [], background_color=(0, 0, 0))
