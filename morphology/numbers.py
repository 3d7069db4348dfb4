"""
morphology/numbers.py

Spell small integers as English words.

    spell(42)    -> "forty-two"
    spell(-5)    -> "minus five"
    spell(100)   -> "100"
    spell(-150)  -> "-150"

Only -99..99 are spelled out; anything else is printed as a numeral (with a
"-" sign rather than the word "minus").
"""

from __future__ import annotations

from typing import Tuple

ONES: Tuple[str, ...] = (
    "zero",
    "one",
    "two",
    "three",
    "four",
    "five",
    "six",
    "seven",
    "eight",
    "nine",
    "ten",
    "eleven",
    "twelve",
    "thirteen",
    "fourteen",
    "fifteen",
    "sixteen",
    "seventeen",
    "eighteen",
    "nineteen",
)

# Index 0 is never reached: values below 20 come from ONES.
TENS: Tuple[str, ...] = (
    "zero",
    "ten",
    "twenty",
    "thirty",
    "forty",
    "fifty",
    "sixty",
    "seventy",
    "eighty",
    "ninety",
)

MAX_SPELLED = 99


def spell(num: int) -> str:
    """Spell out `num` if it lies in -99..99, else return it as digits."""
    magnitude = abs(num)

    if magnitude > MAX_SPELLED:
        return str(num)

    sign = "minus " if num < 0 else ""

    if magnitude < 20:
        return sign + ONES[magnitude]

    tens, ones = divmod(magnitude, 10)
    if ones == 0:
        return sign + TENS[tens]
    return f"{sign}{TENS[tens]}-{ONES[ones]}"


__all__ = ["ONES", "TENS", "MAX_SPELLED", "spell"]
