"""Quantity parsing, formatting and marker rewriting utilities."""

from .formatting import format_decimal, format_fraction, text_fraction_to_unicode
from .number_utils import UNICODE_FRACTIONS, parse_amount
from .rewriting import (
    RewriteResult,
    reduce_for_display,
    rewrite_quantities,
    rewrite_quantities_with_counts,
)

__all__ = [
    "parse_amount",
    "format_decimal",
    "format_fraction",
    "text_fraction_to_unicode",
    "rewrite_quantities",
    "rewrite_quantities_with_counts",
    "reduce_for_display",
    "RewriteResult",
    "UNICODE_FRACTIONS",
]
