import math

import pytest

from recipe_scaler.quantities.number_utils import (
    UNICODE_FRACTIONS,
    _is_fraction,
    _is_number,
    parse_amount,
)


@pytest.mark.parametrize(
    "input_text, expected_amt",
    [
        # Plain decimals
        ("2", 2.0),
        ("2.5", 2.5),
        (".5", 0.5),
        ("  3  ", 3.0),
        # Slash fractions
        ("1/2", 0.5),
        ("3/4", 0.75),
        # Unicode fractions
        ("½", 0.5),
        ("⅓", 1 / 3),
        ("⅞", 0.875),
        # Mixed numbers
        ("1 1/2", 1.5),
        ("1-1/2", 1.5),
        ("1 ½", 1.5),
        ("1½", 1.5),
        ("2-¼", 2.25),
        ("2 3/4", 2.75),
    ],
)
def test_parse_amount(input_text, expected_amt):
    """Test amount parsing for decimals, fractions, glyphs and mixed numbers."""
    assert parse_amount(input_text) == pytest.approx(expected_amt)


@pytest.mark.parametrize(
    "input_text",
    ["", "abc", "a pinch", "1/0", "1//2", "-", "nan", "inf", "1e3", "1/2x"],
)
def test_parse_amount_unparseable(input_text):
    """Unparseable amounts come back as NaN instead of raising."""
    assert math.isnan(parse_amount(input_text))


def test_unicode_fractions_are_exact():
    """Glyph values are computed from their fraction, not rounded decimals."""
    assert UNICODE_FRACTIONS["⅓"] == 1 / 3
    assert UNICODE_FRACTIONS["⅔"] == 2 / 3
    assert UNICODE_FRACTIONS["⅐"] == 1 / 7
    assert len(UNICODE_FRACTIONS) == 18


@pytest.mark.parametrize(
    "input_text, expected",
    [("1/2", True), ("10/3", True), ("1/2/3", False), ("a/b", False), ("2", False)],
)
def test_is_fraction(input_text, expected):
    assert _is_fraction(input_text) is expected


@pytest.mark.parametrize(
    "input_text, expected",
    [("2", True), ("2.25", True), (".5", True), ("2.", False), ("nan", False), ("+1", False)],
)
def test_is_number(input_text, expected):
    assert _is_number(input_text) is expected
