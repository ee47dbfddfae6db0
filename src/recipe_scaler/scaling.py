"""Scaling of whole recipe notes."""

import logging

from recipe_scaler.card.rendering import render_card
from recipe_scaler.quantities.rewriting import (
    reduce_for_display,
    rewrite_quantities_with_counts,
)
from recipe_scaler.recipes.directives import CARD_HEADER_RE, parse_directive

logger = logging.getLogger(__name__)


def transform(text: str) -> str:
    """Scale every quantity marker in a recipe note.

    Reads the serving directive at the top of the note, computes the scale
    factor ``scaled / original`` and rewrites the scaled slot of each marker
    from its original amount. A canonical directive is written back in the
    ``{original=X, scaled=Y}`` form; a card header is kept as written. Text
    without a usable directive is returned unchanged.

    Running the transformation on its own output gives the same text again,
    and changing ``scaled`` re-scales from the original amounts rather than
    from the previous result.

    Args:
        text: Full note text.

    Returns:
        The note with every marker's scaled slot recomputed.

    Examples:
        >>> transform("{original=2, scaled=4}\\n{4} eggs")
        '{original=2, scaled=4}\\n{4, 8} eggs'
    """
    directive = parse_directive(text)
    if directive is None:
        logger.debug("No serving directive found, leaving note unchanged")
        return text

    scale_factor = directive.scale_factor
    logger.debug(
        f"Original serving: {directive.original}, target serving: "
        f"{directive.scaled}, scale factor: {scale_factor}"
    )

    if directive.legacy:
        header = text[directive.start : directive.end]
    else:
        header = directive.to_text()
    result = rewrite_quantities_with_counts(text[directive.end :], scale_factor)

    logger.debug(
        f"Rewrote {result.rewritten} quantity markers, "
        f"left {result.skipped} unparseable markers unchanged"
    )
    return text[: directive.start] + header + result.text


def render_note(text: str) -> str:
    """Render a note for reading: recipe card on top, plain quantities below.

    The card header (if any) is replaced with the rendered card fragment and
    every quantity marker is collapsed to the value it displays.

    Args:
        text: Full note text.

    Returns:
        Text ready to hand to a markdown renderer.
    """
    card_html = render_card(text)
    if card_html is None:
        return reduce_for_display(text)

    body = CARD_HEADER_RE.sub("", text, count=1)
    return card_html + reduce_for_display(body)
