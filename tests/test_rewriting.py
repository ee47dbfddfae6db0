import pytest

from recipe_scaler.quantities.rewriting import (
    reduce_for_display,
    rewrite_quantities,
    rewrite_quantities_with_counts,
)


@pytest.mark.parametrize(
    "input_text, scale_factor, expected_text",
    [
        # Curly markers scale as decimals
        ("{4} eggs", 2, "{4, 8} eggs"),
        ("{3, x} cups flour", 0.5, "{3, 1.5} cups flour"),
        ("{2.5, 99} cups", 2, "{2.5, 5} cups"),
        ("{ 4 , 5 } eggs", 2, "{4, 8} eggs"),
        ("{4,} eggs", 2, "{4, 8} eggs"),
        ("{1} egg", 1 / 3, "{1, 0.33} egg"),
        # Angle markers scale as fractions
        ("<1/2, x> cup", 2, "<1/2, 1> cup"),
        ("<1/3> cup", 3, "<1/3, 1> cup"),
        ("<1 1/2> cups", 2, "<1 1/2, 3> cups"),
        ("<¾> cup", 2, "<¾, 1 ½> cup"),
        ("<½, 1> cup", 1, "<½, ½> cup"),
        ("<1-1/2, 9> tsp", 0.5, "<1-1/2, ¾> tsp"),
        # Markers are rewritten left to right, other text passes through
        (
            "{1} and <1/4> and {2, 7}",
            4,
            "{1, 4} and <1/4, 1> and {2, 8}",
        ),
        ("no markers here", 3, "no markers here"),
    ],
)
def test_rewrite_quantities(input_text, scale_factor, expected_text):
    assert rewrite_quantities(input_text, scale_factor) == expected_text


@pytest.mark.parametrize(
    "input_text",
    ["{abc} eggs", "<abc>", "a <br> b", "<1//2> cup", "{} and <>", "x < 3 and y > 2"],
)
def test_rewrite_leaves_malformed_markers(input_text):
    """Markers that cannot be parsed are left verbatim."""
    assert rewrite_quantities(input_text, 2) == input_text


def test_rewrite_counts():
    result = rewrite_quantities_with_counts("{1} <1//2> <2>", 2)
    assert result.text == "{1, 2} <1//2> <2, 4>"
    assert result.rewritten == 2
    assert result.skipped == 1


def test_rewrite_starts_from_original_amount():
    """Rewriting again never compounds, the scaled slot is always recomputed."""
    once = rewrite_quantities("{4} eggs, <1/2> cup", 2)
    assert rewrite_quantities(once, 2) == once
    assert rewrite_quantities(once, 3) == "{4, 12} eggs, <1/2, 1 ½> cup"


@pytest.mark.parametrize(
    "input_text, expected_text",
    [
        ("{2, 4} eggs", "4 eggs"),
        ("{2} eggs", "2 eggs"),
        ("<1 1/2> cups", "1 ½ cups"),
        ("<1/2, 1 1/2> cups", "1 ½ cups"),
        ("<1/2, ¾> cup", "¾ cup"),
        ("{abc} and <1//2>", "{abc} and <1//2>"),
        ("a <br> b", "a <br> b"),
    ],
)
def test_reduce_for_display(input_text, expected_text):
    assert reduce_for_display(input_text) == expected_text


HUGE_AMOUNT = "9" * 400


@pytest.mark.parametrize(
    "input_text, scale_factor",
    [
        (f"{{{HUGE_AMOUNT}}} grains", 2),
        (f"<{HUGE_AMOUNT}> grains", 2),
        ("{1} egg", float("inf")),
        ("<1/2> cup", float("inf")),
    ],
)
def test_rewrite_skips_non_finite_amounts(input_text, scale_factor):
    """Amounts that overflow to infinity are skipped rather than formatted."""
    result = rewrite_quantities_with_counts(input_text, scale_factor)
    assert result.text == input_text
    assert result.rewritten == 0
    assert result.skipped == 1


@pytest.mark.parametrize(
    "input_text, expected_text",
    [
        (
            "{100000000000000000000000000} grains",
            "{100000000000000000000000000, 200000000000000000000000000} grains",
        ),
        (
            "<100000000000000000000> grains",
            "<100000000000000000000, 200000000000000000000> grains",
        ),
    ],
)
def test_rewrite_large_finite_amounts(input_text, expected_text):
    assert rewrite_quantities(input_text, 2) == expected_text
