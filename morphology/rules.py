"""
morphology/rules.py

Ordered suffix-rule cascades shared by the English noun and verb helpers.

A cascade is a tuple of `SuffixRule` objects evaluated top to bottom. The
first rule whose predicate matches produces the result and no later rule is
consulted, so order is part of the behavior:

    NOUN_RULES = (
        SuffixRule("sibilant", ends_with("ss", "sh", "ch", "x", "o", "z"), append("es")),
        ...
        SuffixRule("default", always, append("s")),
    )

Predicates receive the *lowercased* word; rewrites receive the word as the
caller spelled it, so "GLAMDRING" keeps its casing and gains a lowercase "s".
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Optional

Predicate = Callable[[str], bool]
Rewrite = Callable[[str], str]

VOWELS = frozenset("aeiouy")


def is_vowel(char: str) -> bool:
    """True for a, e, i, o, u and y in either case. Empty input is not a vowel."""
    return len(char) == 1 and char.lower() in VOWELS


def char_from_end(word: str, offset: int) -> str:
    """
    Return the character `offset` positions from the end (1 = last char),
    or "" if the word is too short.
    """
    if offset < 1 or offset > len(word):
        return ""
    return word[-offset]


@dataclass(frozen=True)
class SuffixRule:
    """One (predicate, rewrite) step of a cascade."""

    name: str
    matches: Predicate
    rewrite: Rewrite


# ---------------------------------------------------------------------------
# Predicate builders
# ---------------------------------------------------------------------------


def ends_with(*suffixes: str) -> Predicate:
    return lambda lowered: lowered.endswith(suffixes)


def ends_with_but_not(suffix: str, excluded: str) -> Predicate:
    return lambda lowered: lowered.endswith(suffix) and not lowered.endswith(excluded)


def always(lowered: str) -> bool:
    return True


# ---------------------------------------------------------------------------
# Rewrite builders
# ---------------------------------------------------------------------------


def append(suffix: str) -> Rewrite:
    return lambda word: word + suffix


def replace_tail(drop: int, suffix: str = "") -> Rewrite:
    """Drop the last `drop` characters and append `suffix`."""
    return lambda word: word[: len(word) - drop] + suffix


# ---------------------------------------------------------------------------
# Evaluation
# ---------------------------------------------------------------------------


def first_match(word: str, rules: Iterable[SuffixRule]) -> Optional[SuffixRule]:
    """Return the first rule matching `word`, or None."""
    lowered = word.lower()
    for rule in rules:
        if rule.matches(lowered):
            return rule
    return None


def apply_cascade(word: str, rules: Iterable[SuffixRule]) -> Optional[str]:
    """Rewrite `word` with the first matching rule; None if nothing matched."""
    rule = first_match(word, rules)
    if rule is None:
        return None
    return rule.rewrite(word)


__all__ = [
    "VOWELS",
    "is_vowel",
    "char_from_end",
    "SuffixRule",
    "ends_with",
    "ends_with_but_not",
    "always",
    "append",
    "replace_tail",
    "first_match",
    "apply_cascade",
]
