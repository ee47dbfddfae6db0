"""Rewriting of inline quantity markers.

Two marker syntaxes are recognised anywhere in a note body:

* curly markers, ``{amount}`` or ``{amount, scaled}``, where the amount is a
  plain decimal and the scaled slot is rendered as a decimal;
* angle markers, ``<amount>`` or ``<amount, scaled>``, where the amount may be
  a decimal, a slash fraction, a mixed number or a unicode fraction glyph and
  the scaled slot is rendered with the nearest unicode fraction.

The first slot always holds the unscaled amount and is copied through
verbatim, so scaling the same text again always starts from the original
quantities.
"""

import math
import re
from typing import NamedTuple

from recipe_scaler.quantities.formatting import (
    format_decimal,
    format_fraction,
    text_fraction_to_unicode,
)
from recipe_scaler.quantities.number_utils import FRACTION_GLYPHS, parse_amount

CURLY_MARKER = r"\{\s*(?P<curly>\d+(?:\.\d+)?)\s*(?:,\s*(?P<curly_scaled>[^{}]*?)\s*)?\}"

ANGLE_MARKER = (
    rf"<\s*(?P<angle>[\d \t./\-{FRACTION_GLYPHS}]+?)\s*"
    r"(?:,\s*(?P<angle_scaled>[^<>]*?)\s*)?>"
)

MARKER_RE = re.compile(f"{CURLY_MARKER}|{ANGLE_MARKER}")


class RewriteResult(NamedTuple):
    """Rewritten text plus counts of rewritten and skipped markers."""

    text: str
    rewritten: int
    skipped: int


def rewrite_quantities_with_counts(text: str, scale_factor: float) -> RewriteResult:
    """Rewrite every marker's scaled slot and report how many were touched.

    Args:
        text: Note body without the serving directive.
        scale_factor: Ratio of target to original servings.

    Returns:
        A RewriteResult with the new text, the number of markers rewritten
        and the number left alone because their amount could not be parsed.
    """
    rewritten = 0
    skipped = 0

    def _replace(match: re.Match) -> str:
        nonlocal rewritten, skipped

        if match.group("curly") is not None:
            amount_text = match.group("curly")
            opener, closer, render = "{", "}", format_decimal
        else:
            amount_text = match.group("angle").strip()
            opener, closer, render = "<", ">", format_fraction

        amount = parse_amount(amount_text)
        scaled = amount * scale_factor
        if not (math.isfinite(amount) and math.isfinite(scaled)):
            skipped += 1
            return match.group(0)

        rewritten += 1
        return f"{opener}{amount_text}, {render(scaled)}{closer}"

    new_text = MARKER_RE.sub(_replace, text)
    return RewriteResult(new_text, rewritten, skipped)


def rewrite_quantities(text: str, scale_factor: float) -> str:
    """Rewrite the scaled slot of every quantity marker in `text`.

    Markers whose amount cannot be parsed are left exactly as written.

    Examples:
        >>> rewrite_quantities("{4} eggs, <1/2, 3> cup milk", 2)
        '{4, 8} eggs, <1/2, 1> cup milk'
    """
    return rewrite_quantities_with_counts(text, scale_factor).text


def reduce_for_display(text: str) -> str:
    """Collapse markers to the value a reader should see.

    ``{a, b}`` becomes ``b`` (``a`` when there is no scaled slot) and
    ``<a, b>`` becomes ``b`` (or ``a``) with slash fractions turned into
    unicode glyphs.

    Examples:
        >>> reduce_for_display("{2, 4} eggs and <1 1/2> cups")
        '4 eggs and 1 ½ cups'
    """

    def _replace(match: re.Match) -> str:
        if match.group("curly") is not None:
            return match.group("curly_scaled") or match.group("curly")
        amount_text = match.group("angle").strip()
        if math.isnan(parse_amount(amount_text)):
            return match.group(0)
        return text_fraction_to_unicode(match.group("angle_scaled") or amount_text)

    return MARKER_RE.sub(_replace, text)
