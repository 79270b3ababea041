"""Rendering helpers for the globe visualization."""

from .assets import (
    default_asset_dir,
    get_text_surface,
    load_font,
    load_raster,
    raster_to_surface,
    rgba_to_surface,
)
from .draw import (
    draw_circle_outline_alpha,
    draw_orbit_ring,
    draw_polyline_alpha,
    draw_radial_gradient_disc,
    draw_satellite,
    radial_gradient_pixels,
)
from .globe_panel import GlobePanel
from .lighting import LightingModel, pack_argb, unpack_argb
from .sphere import (
    SphereRenderer,
    render_sphere_pixels,
    sample_bilinear,
    sphere_grid,
)
from .textures import TextureStore
from .ui import (
    Button,
    Checkbox,
    ControlPanel,
    PlanetSelector,
    Slider,
    WidgetStyle,
    build_text_panel,
)

__all__ = [
    "Button",
    "Checkbox",
    "ControlPanel",
    "GlobePanel",
    "LightingModel",
    "PlanetSelector",
    "Slider",
    "SphereRenderer",
    "TextureStore",
    "WidgetStyle",
    "build_text_panel",
    "default_asset_dir",
    "draw_circle_outline_alpha",
    "draw_orbit_ring",
    "draw_polyline_alpha",
    "draw_radial_gradient_disc",
    "draw_satellite",
    "get_text_surface",
    "load_font",
    "load_raster",
    "pack_argb",
    "radial_gradient_pixels",
    "raster_to_surface",
    "render_sphere_pixels",
    "rgba_to_surface",
    "sample_bilinear",
    "sphere_grid",
    "unpack_argb",
]
