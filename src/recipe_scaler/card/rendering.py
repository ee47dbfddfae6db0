"""HTML rendering of recipe cards from a note's bracketed header."""

from typing import Dict, Optional

from bs4 import BeautifulSoup, Tag

from recipe_scaler.card.colors import (
    DEFAULT_COLOR,
    generate_gradient,
    get_text_color,
    resolve_color,
    split_color_spec,
)
from recipe_scaler.quantities.number_utils import _is_number
from recipe_scaler.recipes.directives import parse_card_info
from recipe_scaler.recipes.models import RecipeMetadata


def card_styles(primary_color: str, gradient: str, text_color: str) -> Dict[str, str]:
    """Inline CSS for each part of the card."""
    return {
        "main": (
            "background-color: transparent; border: 6px solid; "
            f"border-image: {gradient} 1; border-radius: 8px; padding: 20px; "
            "margin-bottom: 20px; box-shadow: 0 4px 6px rgba(0, 0, 0, 0.1); "
            "display: inline-block; max-width: 100%;"
        ),
        "title": (
            "font-size: 32px; border-bottom: none; margin-top: -5px; margin-bottom: 5px;"
        ),
        "label": f"color: {primary_color}; font-weight: bold; margin-right: 10px;",
        "details": "display: flex; flex-wrap: wrap; gap: 12px;",
        "pair": (
            "white-space: nowrap; display: inline-block; "
            "margin-left: 5px; margin-right: 5px;"
        ),
        "chips": "margin-top: 10px;",
        "chip": (
            f"display: inline-block; background-color: {primary_color}; "
            "padding: 2px 8px; border-radius: 12px; margin: 5px; font-size: 0.9em;"
        ),
        "chip_text": f"color: {text_color}; font-weight: bold;",
    }


def _same_serving(original: str, scaled: str) -> bool:
    if _is_number(original) and _is_number(scaled):
        return float(original) == float(scaled)
    return original == scaled


def _add_pair(
    soup: BeautifulSoup, parent: Tag, styles: Dict[str, str], label: str, value: str
) -> None:
    pair = soup.new_tag("span", attrs={"style": styles["pair"]})
    label_tag = soup.new_tag("span", attrs={"style": styles["label"]})
    label_tag.string = label
    pair.append(label_tag)
    pair.append(value)
    parent.append(pair)


def build_card(info: RecipeMetadata, default_color: str = DEFAULT_COLOR) -> Tag:
    """Build the card element for parsed recipe metadata.

    The first colour of the card's colour spec is the accent used for labels
    and chips; all colours together form the border gradient.

    Args:
        info: Metadata parsed from the note header.
        default_color: Accent used when the header names no usable colour.

    Returns:
        A BeautifulSoup ``div`` tag holding the card.
    """
    colors = split_color_spec(info.color) or [default_color]
    primary_color = resolve_color(colors[0], default=default_color)
    gradient = generate_gradient(colors)
    styles = card_styles(primary_color, gradient, get_text_color(primary_color))

    soup = BeautifulSoup("", "lxml")
    card = soup.new_tag("div", attrs={"class": "recipe-card", "style": styles["main"]})

    if info.title:
        title = soup.new_tag("h2", attrs={"style": styles["title"]})
        title.string = info.title
        card.append(title)

    details = soup.new_tag("div", attrs={"style": styles["details"]})
    if info.original:
        if info.scaled and not _same_serving(info.original, info.scaled):
            _add_pair(soup, details, styles, "originally served", info.original)
            _add_pair(soup, details, styles, "scaled to serve", info.scaled)
        else:
            _add_pair(soup, details, styles, "servings", info.original)
    for key, value in info.extra.items():
        _add_pair(soup, details, styles, key, value)
    card.append(details)

    if info.chips:
        chips = soup.new_tag("div", attrs={"style": styles["chips"]})
        for chip in info.chips:
            chip_tag = soup.new_tag("span", attrs={"style": styles["chip"]})
            chip_text = soup.new_tag("span", attrs={"style": styles["chip_text"]})
            chip_text.string = chip
            chip_tag.append(chip_text)
            chips.append(chip_tag)
        card.append(chips)

    return card


def render_card(text: str, default_color: str = DEFAULT_COLOR) -> Optional[str]:
    """Render the recipe card for a note, if it starts with a card header.

    Args:
        text: Full note text.
        default_color: Accent used when the header names no usable colour.

    Returns:
        The card as an HTML string, or None if the note has no card header.
    """
    info = parse_card_info(text)
    if info is None:
        return None
    return str(build_card(info, default_color=default_color))
