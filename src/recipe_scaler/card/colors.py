"""Colour lookup and contrast utilities for recipe cards."""

import re
from typing import List, Optional, Tuple

import numpy as np

# --- Constants ---

DEFAULT_COLOR = "#ff8b25"

BLACK = "#000000"
WHITE = "#ffffff"

COLOR_MAP = {
    "red": "#ff0000",
    "blue": "#0000ff",
    "green": "#008000",
    "yellow": "#ffd700",
    "orange": "#ff8b25",
    "brick": "#a52a2a",
    "black": "#000000",
    "sky": "#87ceeb",
    "white": "#ffffff",
    "gray": "#808080",
    "silver": "#c0c0c0",
    "wheat": "#f5deb3",
    "navy": "#000080",
    "teal": "#008080",
    "maroon": "#800000",
    "olive": "#808000",
    "lime": "#00ff00",
    "aqua": "#00ffff",
    "turquoise": "#40e0d0",
    "indigo": "#4b0082",
    "purple": "#ee82ee",
    "magenta": "#ff00ff",
    "tan": "#f4ba86",
    "chocolate": "#d2691e",
    "coral": "#ff7f50",
    "crimson": "#dc143c",
    "khaki": "#f0e68c",
    "salmon": "#fa8072",
    "pink": "#ffb6c1",
}

# sRGB channel weights for relative luminance
LUMINANCE_WEIGHTS = np.array([0.2126, 0.7152, 0.0722])

_HEX_COLOR_RE = re.compile(r"^#[0-9a-f]{6}$")
_HEX_RGB_RE = re.compile(r"^#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})$", re.IGNORECASE)
_HEX_SHORTHAND_RE = re.compile(r"^#?([0-9a-f])([0-9a-f])([0-9a-f])$", re.IGNORECASE)
_COLOR_SEPARATOR_RE = re.compile(r"[+\-]")

# --- Functions ---


def resolve_color(color: Optional[str], default: str = DEFAULT_COLOR) -> str:
    """Resolve a colour name or ``#rrggbb`` code to a hex colour.

    Examples:
        >>> resolve_color(" Teal ")
        '#008080'
        >>> resolve_color("#A1B2C3")
        '#a1b2c3'
        >>> resolve_color("mauve")
        '#ff8b25'
    """
    if not color:
        return default
    color = color.lower().strip()
    if color in COLOR_MAP:
        return COLOR_MAP[color]
    if _HEX_COLOR_RE.match(color):
        return color
    return default


def split_color_spec(spec: Optional[str]) -> List[str]:
    """Split a multi-colour spec such as ``red+blue`` or ``red-blue``."""
    if not spec:
        return []
    return [part.strip() for part in _COLOR_SEPARATOR_RE.split(spec) if part.strip()]


def hex_to_rgb(hex_color: str) -> Optional[Tuple[int, int, int]]:
    """Convert ``#rrggbb`` or ``#rgb`` to an (r, g, b) tuple, or None if invalid."""
    shorthand = _HEX_SHORTHAND_RE.match(hex_color)
    if shorthand:
        hex_color = "".join(channel * 2 for channel in shorthand.groups())

    match = _HEX_RGB_RE.match(hex_color)
    if not match:
        return None
    return tuple(int(channel, 16) for channel in match.groups())


def relative_luminance(rgb: Tuple[int, int, int]) -> float:
    """Relative luminance of an sRGB colour, from 0 (black) to 1 (white)."""
    channels = np.asarray(rgb, dtype=float) / 255
    linear = np.where(
        channels <= 0.03928,
        channels / 12.92,
        ((channels + 0.055) / 1.055) ** 2.4,
    )
    return float(linear @ LUMINANCE_WEIGHTS)


def contrast_ratio(color1: str, color2: str) -> float:
    """Contrast ratio between two hex colours, from 1 to 21."""
    luminances = []
    for color in (color1, color2):
        rgb = hex_to_rgb(color)
        if rgb is None:
            raise ValueError(f"Not a hex colour: {color}")
        luminances.append(relative_luminance(rgb))
    lum1, lum2 = luminances
    brightest = max(lum1, lum2)
    darkest = min(lum1, lum2)
    return (brightest + 0.05) / (darkest + 0.05)


def get_text_color(background: str) -> str:
    """Choose black or white text, whichever contrasts more with `background`.

    Colour names are looked up in the palette; any hex code `hex_to_rgb`
    understands, shorthand included, is used as given.

    Examples:
        >>> get_text_color("#000000")
        '#ffffff'
        >>> get_text_color("#fff")
        '#000000'
    """
    name = (background or "").lower().strip()
    if name in COLOR_MAP:
        background = COLOR_MAP[name]
    elif not background or hex_to_rgb(background) is None:
        background = DEFAULT_COLOR
    with_black = contrast_ratio(background, BLACK)
    with_white = contrast_ratio(background, WHITE)
    return WHITE if with_white > with_black else BLACK


def generate_gradient(colors: List[str]) -> str:
    """Build a left-to-right CSS gradient through the given colours."""
    valid_colors = [resolve_color(color) for color in colors] or [DEFAULT_COLOR]
    if len(valid_colors) == 1:
        valid_colors = valid_colors * 2
    return f"linear-gradient(to right, {', '.join(valid_colors)})"
