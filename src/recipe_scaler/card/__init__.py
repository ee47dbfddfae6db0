"""Recipe card rendering and colour utilities."""

from .colors import (
    COLOR_MAP,
    DEFAULT_COLOR,
    contrast_ratio,
    generate_gradient,
    get_text_color,
    hex_to_rgb,
    relative_luminance,
    resolve_color,
    split_color_spec,
)
from .rendering import build_card, render_card

__all__ = [
    "COLOR_MAP",
    "DEFAULT_COLOR",
    "resolve_color",
    "split_color_spec",
    "hex_to_rgb",
    "relative_luminance",
    "contrast_ratio",
    "get_text_color",
    "generate_gradient",
    "build_card",
    "render_card",
]
