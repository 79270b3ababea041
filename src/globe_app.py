# src/globe_app.py
"""
Globe 2D Visualization
======================

Animated, textured planet with orbiting satellites, a movable light source
and the day/night terminator. Drag inside the globe area to spin the planet;
use the controls on the right to change planet, speed, satellites and light.
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

import pygame
from pygame.locals import DOUBLEBUF

from globe_viz.core.config import WINDOW_CFG
from globe_viz.core.logging_utils import configure_logging, log_texture_status
from globe_viz.render import ControlPanel, GlobePanel, TextureStore, build_text_panel, load_font

logger = logging.getLogger("globe_viz.app")


def _parse_size(value: str) -> tuple[int, int]:
    try:
        width, height = (int(part) for part in value.lower().split("x", 1))
    except ValueError as err:
        raise argparse.ArgumentTypeError(f"expected WIDTHxHEIGHT, got {value!r}") from err
    if width <= WINDOW_CFG.control_panel_width or height <= 0:
        raise argparse.ArgumentTypeError(f"window size {value!r} is too small")
    return width, height


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Animated 2D planet globe with lighting and satellites.")
    parser.add_argument("--assets", type=Path, default=None, help="Directory holding the planet and star textures")
    parser.add_argument(
        "--size",
        type=_parse_size,
        default=WINDOW_CFG.size,
        help="Window size as WIDTHxHEIGHT (default: %(default)s)",
    )
    parser.add_argument("--fps", type=int, default=WINDOW_CFG.target_fps, help="Target frame rate")
    parser.add_argument("--show-fps", action="store_true", help="Draw a frame rate counter")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    return parser.parse_args(argv)


def _set_display_mode_with_vsync(size: tuple[int, int], flags: int = 0) -> pygame.Surface:
    """Create the display surface with double buffering and vsync when available."""
    flags |= DOUBLEBUF
    try:
        return pygame.display.set_mode(size, flags, vsync=1)
    except pygame.error as err:
        try:
            return pygame.display.set_mode(size, flags)
        except pygame.error:
            raise err


def _globe_rect(screen: pygame.Surface) -> pygame.Rect:
    width, height = screen.get_size()
    return pygame.Rect(0, 0, max(1, width - WINDOW_CFG.control_panel_width), height)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_level)
    logger.info("Starting Globe 2D Visualization")

    pygame.init()
    pygame.display.set_caption(WINDOW_CFG.title)
    screen = _set_display_mode_with_vsync(args.size)

    textures = TextureStore(args.assets)
    textures.load_all()
    log_texture_status(textures, logger)

    globe_rect = _globe_rect(screen)
    globe = GlobePanel(textures, size=globe_rect.size, show_fps=args.show_fps)
    controls = ControlPanel(
        globe,
        (globe_rect.right, 0, WINDOW_CFG.control_panel_width, screen.get_height()),
    )
    control_font = load_font(("arial", "helvetica", "dejavusans"), 14)

    notice: pygame.Surface | None = None
    if not globe.textures_loaded():
        notice = build_text_panel(
            control_font,
            [("Some textures are missing.", (255, 214, 130)), ("Using fallback colors.", (234, 241, 255))],
            background_color=(12, 18, 30, 180),
            padding=(10, 8),
        )

    clock = pygame.time.Clock()
    dragging = False
    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False
            elif controls.handle_event(event):
                continue
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                dragging = globe_rect.collidepoint(event.pos)
            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                dragging = False
            elif event.type == pygame.MOUSEMOTION and dragging:
                if globe_rect.collidepoint(event.pos):
                    globe.on_mouse_drag(event.pos)

        globe.render(screen.subsurface(globe_rect))
        if notice is not None:
            screen.blit(notice, (10, 90))
        controls.draw(screen, control_font)
        pygame.display.flip()
        clock.tick(args.fps)

    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
