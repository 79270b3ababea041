from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Sequence

import pygame

from globe_viz.core.config import ANIMATION_CFG, LIGHTING_CFG, SATELLITE_CFG, WINDOW_CFG, WindowCfg
from globe_viz.data.planets import DEFAULT_PLANET, planet_display_names, resolve_planet

from .assets import Color, get_text_surface, raster_to_surface

if TYPE_CHECKING:  # pragma: no cover
    from .globe_panel import GlobePanel


@dataclass(frozen=True)
class WidgetStyle:
    base_color: Color
    hover_color: Color
    accent_color: Color
    text_color: tuple[int, int, int]
    radius: int

    @classmethod
    def from_cfg(cls, cfg: WindowCfg = WINDOW_CFG) -> "WidgetStyle":
        return cls(
            base_color=cfg.widget_color,
            hover_color=cfg.widget_hover_color,
            accent_color=cfg.widget_accent_color,
            text_color=cfg.panel_text_color,
            radius=cfg.widget_radius,
        )


class Button:
    """Simple rectangular button with hover feedback and a click callback."""

    def __init__(self, rect: tuple[int, int, int, int], text: str, callback: Callable[[], None]) -> None:
        self.rect = pygame.Rect(rect)
        self.text = text
        self._callback = callback

    def draw(
        self,
        surface: pygame.Surface,
        font: pygame.font.Font,
        style: WidgetStyle,
        mouse_pos: tuple[int, int] | None = None,
    ) -> None:
        if mouse_pos is None:
            mouse_pos = pygame.mouse.get_pos()
        hovered = self.rect.collidepoint(mouse_pos)
        color = style.hover_color if hovered else style.base_color
        pygame.draw.rect(surface, color, self.rect, border_radius=style.radius)
        text_surf = get_text_surface(font, self.text, (0, 0, 0))
        surface.blit(text_surf, text_surf.get_rect(center=self.rect.center))

    def handle_event(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self._callback()
                return True
        return False


class Slider:
    """Horizontal slider; reports snapped values through ``on_change``."""

    def __init__(
        self,
        rect: tuple[int, int, int, int],
        label: str,
        minimum: float,
        maximum: float,
        value: float,
        on_change: Callable[[float], None],
        *,
        step: float = 1.0,
        formatter: Callable[[float], str] = lambda v: f"{v:g}",
    ) -> None:
        if maximum <= minimum:
            raise ValueError("Slider maximum must exceed minimum")
        self.rect = pygame.Rect(rect)
        self.label = label
        self.minimum = minimum
        self.maximum = maximum
        self.step = step
        self.value = self._snap(value)
        self._on_change = on_change
        self._formatter = formatter
        self._dragging = False

    def _snap(self, value: float) -> float:
        value = max(self.minimum, min(value, self.maximum))
        if self.step > 0:
            steps = round((value - self.minimum) / self.step)
            value = min(self.maximum, self.minimum + steps * self.step)
        return round(value, 6)

    def fraction(self) -> float:
        return (self.value - self.minimum) / (self.maximum - self.minimum)

    def set_value(self, value: float, *, notify: bool = False) -> None:
        snapped = self._snap(value)
        changed = snapped != self.value
        self.value = snapped
        if notify and changed:
            self._on_change(snapped)

    def _value_at(self, x: int) -> float:
        t = (x - self.rect.left) / max(1, self.rect.width)
        return self.minimum + max(0.0, min(t, 1.0)) * (self.maximum - self.minimum)

    def handle_event(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.inflate(0, 10).collidepoint(event.pos):
                self._dragging = True
                self.set_value(self._value_at(event.pos[0]), notify=True)
                return True
        elif event.type == pygame.MOUSEMOTION and self._dragging:
            self.set_value(self._value_at(event.pos[0]), notify=True)
            return True
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1 and self._dragging:
            self._dragging = False
            return True
        return False

    def draw(self, surface: pygame.Surface, font: pygame.font.Font, style: WidgetStyle) -> None:
        caption = get_text_surface(font, f"{self.label}: {self._formatter(self.value)}", style.text_color)
        surface.blit(caption, (self.rect.left, self.rect.top - caption.get_height() - 2))
        track = pygame.Rect(self.rect.left, self.rect.centery - 2, self.rect.width, 4)
        pygame.draw.rect(surface, style.base_color, track, border_radius=2)
        filled = track.copy()
        filled.width = int(track.width * self.fraction())
        pygame.draw.rect(surface, style.accent_color, filled, border_radius=2)
        knob_x = self.rect.left + int(self.rect.width * self.fraction())
        pygame.draw.circle(surface, style.text_color, (knob_x, self.rect.centery), 7)


class Checkbox:
    def __init__(
        self,
        rect: tuple[int, int, int, int],
        label: str,
        checked: bool,
        on_toggle: Callable[[bool], None],
    ) -> None:
        self.rect = pygame.Rect(rect)
        self.label = label
        self.checked = checked
        self._on_toggle = on_toggle

    def handle_event(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.checked = not self.checked
                self._on_toggle(self.checked)
                return True
        return False

    def draw(self, surface: pygame.Surface, font: pygame.font.Font, style: WidgetStyle) -> None:
        box = pygame.Rect(self.rect.left, self.rect.centery - 8, 16, 16)
        pygame.draw.rect(surface, style.text_color, box, 1, border_radius=3)
        if self.checked:
            pygame.draw.rect(surface, style.accent_color, box.inflate(-6, -6), border_radius=2)
        text = get_text_surface(font, self.label, style.text_color)
        surface.blit(text, text.get_rect(midleft=(box.right + 8, self.rect.centery)))


class PlanetSelector:
    """Cycles through planet names; shows a strip of the texture behind the name."""

    ARROW_WIDTH = 22

    def __init__(
        self,
        rect: tuple[int, int, int, int],
        names: Sequence[str],
        selected: str,
        on_select: Callable[[str], None],
        *,
        preview_source: Callable[[str], pygame.Surface | None] | None = None,
    ) -> None:
        if not names:
            raise ValueError("names must not be empty")
        self.rect = pygame.Rect(rect)
        self.names = list(names)
        self.index = self.names.index(selected) if selected in self.names else 0
        self._on_select = on_select
        self._preview_source = preview_source
        self._preview_cache: dict[str, pygame.Surface | None] = {}

    @property
    def selected(self) -> str:
        return self.names[self.index]

    def select(self, name: str, *, notify: bool = False) -> None:
        if name not in self.names:
            return
        self.index = self.names.index(name)
        if notify:
            self._on_select(name)

    def cycle(self, step: int) -> None:
        self.index = (self.index + step) % len(self.names)
        self._on_select(self.selected)

    def handle_event(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if not self.rect.collidepoint(event.pos):
                return False
            if event.pos[0] < self.rect.left + self.ARROW_WIDTH:
                self.cycle(-1)
            else:
                self.cycle(1)
            return True
        if event.type == pygame.MOUSEWHEEL and self.rect.collidepoint(pygame.mouse.get_pos()):
            self.cycle(-event.y)
            return True
        return False

    def _preview(self, name: str) -> pygame.Surface | None:
        if name not in self._preview_cache:
            source = self._preview_source(name) if self._preview_source else None
            if source is not None:
                source = pygame.transform.smoothscale(source, self.rect.size)
            self._preview_cache[name] = source
        return self._preview_cache[name]

    def draw(self, surface: pygame.Surface, font: pygame.font.Font, style: WidgetStyle) -> None:
        name = self.selected
        preview = self._preview(name)
        if preview is not None:
            surface.blit(preview, self.rect.topleft)
            shade = pygame.Surface(self.rect.size, pygame.SRCALPHA)
            shade.fill((0, 100, 200, 110))
            surface.blit(shade, self.rect.topleft)
        else:
            pygame.draw.rect(surface, style.base_color, self.rect, border_radius=style.radius)
        shadow = get_text_surface(font, name, (0, 0, 0))
        text = get_text_surface(font, name, style.text_color)
        rect = text.get_rect(center=self.rect.center)
        surface.blit(shadow, rect.move(1, 1))
        surface.blit(text, rect)
        for label, anchor in (("<", self.rect.left + self.ARROW_WIDTH // 2), (">", self.rect.right - self.ARROW_WIDTH // 2)):
            arrow = get_text_surface(font, label, style.text_color)
            surface.blit(arrow, arrow.get_rect(center=(anchor, self.rect.centery)))


class ControlPanel:
    """Right-hand column of widgets bound to a :class:`GlobePanel`."""

    def __init__(
        self,
        globe: "GlobePanel",
        rect: tuple[int, int, int, int],
        *,
        style: WidgetStyle | None = None,
        cfg: WindowCfg = WINDOW_CFG,
    ) -> None:
        self.globe = globe
        self.rect = pygame.Rect(rect)
        self.style = style or WidgetStyle.from_cfg(cfg)
        self._cfg = cfg

        x = self.rect.left + 12
        width = self.rect.width - 24
        y = self.rect.top + 34
        self.speed_slider = Slider(
            (x, y, width, 16),
            "Speed",
            ANIMATION_CFG.min_speed,
            ANIMATION_CFG.max_speed,
            ANIMATION_CFG.default_speed,
            globe.set_animation_speed,
            step=0.1,
            formatter=lambda v: f"{v:.1f}x",
        )
        y += 52
        self.satellite_slider = Slider(
            (x, y, width, 16),
            "Satellites",
            0,
            SATELLITE_CFG.max_count,
            SATELLITE_CFG.default_count,
            lambda v: globe.set_satellite_count(int(v)),
            formatter=lambda v: f"{int(v)}",
        )
        y += 44
        self.planet_selector = PlanetSelector(
            (x, y, width, 42),
            planet_display_names(),
            DEFAULT_PLANET.name,
            globe.set_planet,
            preview_source=self._planet_preview,
        )
        y += 58
        self.orbit_checkbox = Checkbox((x, y, width, 20), "Show Orbits", True, globe.set_show_orbits)
        y += 28
        self.light_checkbox = Checkbox((x, y, width, 20), "Show Light", True, globe.set_show_light_source)
        y += 28
        self.terminator_checkbox = Checkbox(
            (x, y, width, 20), "Day/Night Line", True, globe.set_show_terminator
        )
        y += 56
        self.light_slider = Slider(
            (x, y, width, 16),
            "Light Angle",
            0,
            360,
            math.degrees(LIGHTING_CFG.default_angle),
            lambda v: globe.set_light_angle(math.radians(v)),
            formatter=lambda v: f"{int(v)}\N{DEGREE SIGN}",
        )
        y += 34
        self.reset_button = Button((x, y, width, 30), "Reset", self.reset)
        self.widgets = [
            self.speed_slider,
            self.satellite_slider,
            self.planet_selector,
            self.orbit_checkbox,
            self.light_checkbox,
            self.terminator_checkbox,
            self.light_slider,
            self.reset_button,
        ]

    def _planet_preview(self, name: str) -> pygame.Surface | None:
        pixels = self.globe.textures.texture_of(resolve_planet(name))
        if pixels is None:
            return None
        return raster_to_surface(pixels)

    def reset(self) -> None:
        self.speed_slider.set_value(ANIMATION_CFG.default_speed)
        self.satellite_slider.set_value(SATELLITE_CFG.default_count)
        self.planet_selector.select(DEFAULT_PLANET.name)
        self.orbit_checkbox.checked = True
        self.light_checkbox.checked = True
        self.terminator_checkbox.checked = True
        self.light_slider.set_value(math.degrees(LIGHTING_CFG.default_angle))
        self.globe.reset()

    def handle_event(self, event: pygame.event.Event) -> bool:
        for widget in self.widgets:
            if widget.handle_event(event):
                return True
        return False

    def draw(self, surface: pygame.Surface, font: pygame.font.Font) -> None:
        pygame.draw.rect(surface, self._cfg.panel_background, self.rect)
        for widget in self.widgets:
            widget.draw(surface, font, self.style)


def build_text_panel(
    font: pygame.font.Font,
    lines: Sequence[tuple[str, tuple[int, int, int]]],
    *,
    background_color: Color,
    padding: tuple[int, int] = (14, 14),
) -> pygame.Surface:
    if not lines:
        raise ValueError("lines must not be empty")
    padding_x, padding_y = padding
    line_height = font.get_linesize()
    width = max(font.size(text)[0] for text, _ in lines) + padding_x * 2
    height = line_height * len(lines) + padding_y * 2
    panel_surface = pygame.Surface((width, height), pygame.SRCALPHA)
    pygame.draw.rect(panel_surface, background_color, panel_surface.get_rect(), border_radius=12)
    for idx, (text, color) in enumerate(lines):
        if not text:
            continue
        panel_surface.blit(get_text_surface(font, text, color), (padding_x, padding_y + idx * line_height))
    return panel_surface


__all__ = [
    "Button",
    "Checkbox",
    "ControlPanel",
    "PlanetSelector",
    "Slider",
    "WidgetStyle",
    "build_text_panel",
]
