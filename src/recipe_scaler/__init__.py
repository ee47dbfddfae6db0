"""Recipe Scaler - Utilities for scaling recipe notes and rendering recipe cards."""

__version__ = "0.1.0"
__author__ = "Kurt Thorn"
__email__ = "kurt.thorn@gmail.com"

from . import card, notes, quantities, recipes
from .card import render_card
from .scaling import render_note, transform

__all__ = [
    "card",
    "notes",
    "quantities",
    "recipes",
    "transform",
    "render_card",
    "render_note",
]
