"""Parsing of the serving directive on the first line of a recipe note.

Two header syntaxes are understood:

* the canonical directive ``{original=4, scaled=6}`` (``scaled`` may be left
  out, in which case the recipe is not scaled);
* the older recipe card header ``[original=4, scaled=6, title=Soup, card]``,
  which only counts as recipe metadata when the bare ``card`` token is present.

Parsing never raises: anything malformed is reported as "no directive".
"""

import math
import re
from typing import List, Optional, Tuple

from recipe_scaler.quantities.number_utils import _is_number
from recipe_scaler.recipes.models import RecipeMetadata, ServingDirective

# --- Constants ---

_NUMBER = r"(\d+(?:\.\d+)?)"
_WS = r"[ \t]*"

CANONICAL_DIRECTIVE_RE = re.compile(
    rf"^{_WS}\{{{_WS}original{_WS}={_WS}{_NUMBER}{_WS}"
    rf"(?:,{_WS}scaled{_WS}={_WS}{_NUMBER}{_WS})?\}}"
)

CARD_HEADER_RE = re.compile(r"^\[(.+?)\]")

CARD_MARKER = "card"

# Keys with a dedicated place on the card; everything else is shown as a field
RESERVED_KEYS = {"original", "scaled", "title", "color", "chip"}

# --- Functions ---


def _split_pairs(header: str) -> Tuple[List[Tuple[str, str]], bool]:
    """Split a bracket header body into ordered (key, value) pairs.

    Returns:
        A tuple of the pairs and whether the bare ``card`` token was present.
    """
    pairs = []
    is_card = False
    for item in header.split(","):
        item = item.strip()
        if not item:
            continue
        if item.lower() == CARD_MARKER:
            is_card = True
            continue
        key, _, value = item.partition("=")
        pairs.append((key.strip(), value.strip()))
    return pairs, is_card


def _positive_number(text: Optional[str]) -> Optional[float]:
    """Return `text` as a float if it is a positive, finite plain number, else None."""
    if text is None or not _is_number(text):
        return None
    value = float(text)
    return value if math.isfinite(value) and value > 0 else None


def parse_card_info(text: str) -> Optional[RecipeMetadata]:
    """Parse recipe card metadata from a bracketed header on the first line.

    Args:
        text: Full note text.

    Returns:
        RecipeMetadata, or None if the note does not start with a bracket
        header containing the ``card`` token.

    Examples:
        >>> info = parse_card_info("[title=Pancakes, original=4, chip=vegan, card]")
        >>> info.title, info.original, info.chips
        ('Pancakes', '4', ['vegan'])
    """
    match = CARD_HEADER_RE.match(text)
    if not match:
        return None

    pairs, is_card = _split_pairs(match.group(1))
    if not is_card:
        return None

    info = RecipeMetadata()
    for key, value in pairs:
        if key == "chip":
            # chip=a+b is the older way of listing several chips at once
            info.chips.extend(chip.strip() for chip in value.split("+") if chip.strip())
        elif key in RESERVED_KEYS:
            setattr(info, key, value)
        else:
            info.extra[key] = value
    return info


def _parse_canonical(text: str) -> Optional[ServingDirective]:
    match = CANONICAL_DIRECTIVE_RE.match(text)
    if not match:
        return None

    original_text, scaled_text = match.group(1), match.group(2) or match.group(1)
    original = _positive_number(original_text)
    scaled = _positive_number(scaled_text)
    if original is None or scaled is None:
        return None

    return ServingDirective(
        original=original,
        scaled=scaled,
        original_text=original_text,
        scaled_text=scaled_text,
        start=match.start(),
        end=match.end(),
    )


def _parse_legacy(text: str) -> Optional[ServingDirective]:
    info = parse_card_info(text)
    if info is None:
        return None

    original = _positive_number(info.original)
    if original is None:
        return None

    scaled_text = info.scaled if _positive_number(info.scaled) else info.original
    header = CARD_HEADER_RE.match(text)
    return ServingDirective(
        original=original,
        scaled=float(scaled_text),
        original_text=info.original,
        scaled_text=scaled_text,
        start=header.start(),
        end=header.end(),
        legacy=True,
    )


def parse_directive(text: str) -> Optional[ServingDirective]:
    """Find the serving directive at the start of a recipe note.

    The canonical ``{original=..., scaled=...}`` form is tried first, then the
    ``[..., card]`` header. A directive whose original serving count is not a
    positive number is treated as absent.

    Args:
        text: Full note text.

    Returns:
        The parsed ServingDirective, or None if the note has no usable directive.
    """
    return _parse_canonical(text) or _parse_legacy(text)
