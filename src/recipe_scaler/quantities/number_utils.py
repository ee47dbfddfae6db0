"""Amount parsing for quantity markers: decimals, fractions and unicode glyphs."""

import math
import re
from decimal import Decimal, InvalidOperation

# --- Constants ---

# Unicode vulgar fractions as (numerator, denominator), in display preference order
UNICODE_FRACTION_PARTS = {
    "¼": (1, 4),
    "½": (1, 2),
    "¾": (3, 4),
    "⅐": (1, 7),
    "⅑": (1, 9),
    "⅒": (1, 10),
    "⅓": (1, 3),
    "⅔": (2, 3),
    "⅕": (1, 5),
    "⅖": (2, 5),
    "⅗": (3, 5),
    "⅘": (4, 5),
    "⅙": (1, 6),
    "⅚": (5, 6),
    "⅛": (1, 8),
    "⅜": (3, 8),
    "⅝": (5, 8),
    "⅞": (7, 8),
}

UNICODE_FRACTIONS = {
    glyph: numerator / denominator
    for glyph, (numerator, denominator) in UNICODE_FRACTION_PARTS.items()
}

FRACTION_GLYPHS = "".join(UNICODE_FRACTION_PARTS)

_DECIMAL_RE = re.compile(r"^(?:\d+(?:\.\d+)?|\.\d+)$")
_GLYPH_RE = re.compile(f"([{FRACTION_GLYPHS}])")
_PART_SEPARATOR_RE = re.compile(r"[\s\-]+")

# --- Functions ---


def _is_integer(text: str) -> bool:
    """Check if a string represents a valid unsigned integer."""
    return text.isdigit()


def _is_number(text: str) -> bool:
    """Check if a string is a plain decimal number (e.g., '2', '2.5', '.5').

    Signs, exponents and special values such as 'nan' are rejected.
    """
    return bool(_DECIMAL_RE.match(text))


def _is_fraction(text: str) -> bool:
    """Check if a string represents a valid fraction (e.g., '1/2')."""
    if "/" not in text:
        return False
    parts = text.split("/")
    return len(parts) == 2 and all(_is_integer(part) for part in parts)


def _parse_fraction(text: str) -> Decimal:
    """Parse a fraction string (e.g., '1/2') into a Decimal."""
    if not _is_fraction(text):
        raise ValueError(f"Not a fraction: {text}")

    numerator_str, denominator_str = text.split("/")
    numerator = Decimal(numerator_str)
    denominator = Decimal(denominator_str)

    if denominator == 0:
        raise ZeroDivisionError("Division by zero in fraction")

    return numerator / denominator


def _parse_part(part: str) -> float:
    """Resolve a single amount part as a glyph, a slash fraction or a decimal."""
    if part in UNICODE_FRACTIONS:
        return UNICODE_FRACTIONS[part]
    if _is_fraction(part):
        return float(_parse_fraction(part))
    if _is_number(part):
        return float(part)
    raise ValueError(f"Not an amount: {part}")


def parse_amount(text: str) -> float:
    """Parse a marker amount into a float.

    Accepts plain decimals, unicode vulgar fractions, slash fractions and
    mixed numbers whose parts are separated by whitespace or a hyphen. A glyph
    written directly after a whole number ('1½') counts as a separate part.

    Args:
        text: The amount token taken from a quantity marker.

    Returns:
        The numeric value, or NaN if the token cannot be parsed.

    Examples:
        >>> parse_amount("1 1/2")
        1.5
        >>> parse_amount("2-¼")
        2.25
        >>> parse_amount("a pinch")
        nan
    """
    spaced = _GLYPH_RE.sub(r" \1 ", text)
    parts = [part for part in _PART_SEPARATOR_RE.split(spaced) if part]
    if not parts:
        return math.nan

    try:
        return sum(_parse_part(part) for part in parts)
    except (ValueError, ZeroDivisionError, InvalidOperation):
        return math.nan
