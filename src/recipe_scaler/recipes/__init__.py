"""Recipe note headers: serving directives and recipe card metadata."""

from .directives import parse_card_info, parse_directive
from .models import RecipeMetadata, ServingDirective

__all__ = [
    "parse_directive",
    "parse_card_info",
    "ServingDirective",
    "RecipeMetadata",
]
