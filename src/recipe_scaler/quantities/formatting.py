"""Display formatting for scaled quantities."""

import math
import re
from decimal import ROUND_HALF_UP, Decimal, localcontext
from fractions import Fraction

from recipe_scaler.quantities.number_utils import (
    UNICODE_FRACTION_PARTS,
    UNICODE_FRACTIONS,
)

DECIMAL_PLACES = 2

# Remainders this close to 0 or 1 are treated as whole numbers
WHOLE_TOLERANCE = 1e-9

_GLYPH_BY_FRACTION = {
    Fraction(numerator, denominator): glyph
    for glyph, (numerator, denominator) in UNICODE_FRACTION_PARTS.items()
}

_TEXT_FRACTION_RE = re.compile(r"(?:(\d+)[\s\-])?(\d+)/(\d+)")


def format_decimal(value: float, places: int = DECIMAL_PLACES) -> str:
    """Format a value with at most `places` fractional digits.

    Rounds half-up, drops the decimal point for whole numbers and trims
    trailing zeros otherwise.

    Examples:
        >>> format_decimal(3.0)
        '3'
        >>> format_decimal(1.5)
        '1.5'
        >>> format_decimal(2.3333)
        '2.33'
    """
    quantum = Decimal(1).scaleb(-places)
    exact = Decimal(repr(float(value)))
    with localcontext() as ctx:
        # Room for every integer digit plus the requested fractional places
        ctx.prec = max(ctx.prec, exact.adjusted() + places + 2)
        rounded = exact.quantize(quantum, rounding=ROUND_HALF_UP)
    if rounded == rounded.to_integral_value():
        return str(int(rounded))
    return format(rounded, "f").rstrip("0").rstrip(".")


def _closest_glyph(remainder: float) -> str:
    """Return the glyph whose value is closest to `remainder`.

    Ties go to the glyph listed first in the fraction table.
    """
    best_glyph = None
    best_distance = math.inf
    for glyph, glyph_value in UNICODE_FRACTIONS.items():
        distance = abs(remainder - glyph_value)
        if distance < best_distance:
            best_glyph, best_distance = glyph, distance
    return best_glyph


def format_fraction(value: float) -> str:
    """Format a value as a whole number plus the nearest unicode fraction.

    Examples:
        >>> format_fraction(0.5)
        '½'
        >>> format_fraction(2.3)
        '2 ⅓'
        >>> format_fraction(3.0)
        '3'
    """
    whole = math.floor(value)
    remainder = value - whole

    if remainder < WHOLE_TOLERANCE:
        return str(whole)
    if 1 - remainder < WHOLE_TOLERANCE:
        return str(whole + 1)

    glyph = _closest_glyph(remainder)
    return f"{whole} {glyph}" if whole else glyph


def text_fraction_to_unicode(text: str) -> str:
    """Replace slash fractions in `text` with unicode glyphs where one exists.

    Mixed numbers written as '1 1/2' or '1-1/2' become '1 ½'. Fractions without
    a glyph are left as written.

    Examples:
        >>> text_fraction_to_unicode("1-1/2 cups")
        '1 ½ cups'
        >>> text_fraction_to_unicode("2/4")
        '½'
        >>> text_fraction_to_unicode("3/11")
        '3/11'
    """

    def _replace(match: re.Match) -> str:
        whole, numerator, denominator = match.groups()
        if int(denominator) == 0:
            return match.group(0)
        glyph = _GLYPH_BY_FRACTION.get(Fraction(int(numerator), int(denominator)))
        if glyph is None:
            return match.group(0)
        return f"{whole} {glyph}" if whole else glyph

    return _TEXT_FRACTION_RE.sub(_replace, text)
