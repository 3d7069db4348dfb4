# tests/test_numbers.py
"""
tests/test_numbers.py
---------------------

Unit tests for :func:`morphology.numbers.spell`.
"""

from __future__ import annotations

import pytest

from morphology.numbers import spell


@pytest.mark.parametrize(
    "num, expected",
    [
        (0, "zero"),
        (1, "one"),
        (7, "seven"),
        (10, "ten"),
        (12, "twelve"),
        (15, "fifteen"),
        (17, "seventeen"),
        (19, "nineteen"),
        (20, "twenty"),
        (42, "forty-two"),
        (90, "ninety"),
        (99, "ninety-nine"),
    ],
)
def test_spell_in_range(num: int, expected: str) -> None:
    """Values in 0..99 are written out in words."""
    assert spell(num) == expected


def test_spell_negative_uses_minus_word() -> None:
    """Negative values in range get the word 'minus'."""
    assert spell(-1) == "minus one"
    assert spell(-5) == "minus five"
    assert spell(-29) == "minus twenty-nine"
    assert spell(-60) == "minus sixty"


def test_spell_out_of_range_is_numeric() -> None:
    """Outside -99..99 the numeral is returned, with a '-' sign."""
    assert spell(100) == "100"
    assert spell(1234) == "1234"
    assert spell(-100) == "-100"
    assert spell(-150) == "-150"
