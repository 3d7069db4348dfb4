"""
morphology/pronouns.py

Pronoun tables for the four grammatical genders used by the templates.

Any integer is accepted as a gender code; values outside 0..3 are clamped to
the nearest valid gender rather than raising.

    personal_pronoun(Gender.FEMALE)   -> "she"
    reflexive_pronoun(3)              -> "themselves"
    verb_plurality(Gender.PLURAL)     -> 1
"""

from __future__ import annotations

from enum import IntEnum
from typing import Tuple, Union


class Gender(IntEnum):
    NEUTRAL = 0
    MALE = 1
    FEMALE = 2
    PLURAL = 3


GenderLike = Union[Gender, int]

GENDER_NAMES: Tuple[str, ...] = ("neutral", "masculine", "feminine", "plural")
POSSESSIVE_PRONOUNS: Tuple[str, ...] = ("its", "his", "hers", "theirs")
POSSESSIVE_DETERMINERS: Tuple[str, ...] = ("its", "his", "her", "their")
PERSONAL_PRONOUNS: Tuple[str, ...] = ("it", "he", "she", "they")
OBJECTIVE_PRONOUNS: Tuple[str, ...] = ("it", "him", "her", "them")
REFLEXIVE_PRONOUNS: Tuple[str, ...] = ("itself", "himself", "herself", "themselves")


def clamp_gender(gender: GenderLike) -> Gender:
    return Gender(max(Gender.NEUTRAL, min(Gender.PLURAL, int(gender))))


def gender_name(gender: GenderLike) -> str:
    return GENDER_NAMES[clamp_gender(gender)]


def possessive_pronoun(gender: GenderLike) -> str:
    """Standalone possessive: "the sword is hers"."""
    return POSSESSIVE_PRONOUNS[clamp_gender(gender)]


def possessive_determiner(gender: GenderLike) -> str:
    """Possessive before a noun: "her sword"."""
    return POSSESSIVE_DETERMINERS[clamp_gender(gender)]


def personal_pronoun(gender: GenderLike) -> str:
    return PERSONAL_PRONOUNS[clamp_gender(gender)]


def objective_pronoun(gender: GenderLike) -> str:
    return OBJECTIVE_PRONOUNS[clamp_gender(gender)]


def reflexive_pronoun(gender: GenderLike) -> str:
    return REFLEXIVE_PRONOUNS[clamp_gender(gender)]


def verb_plurality(gender: GenderLike) -> int:
    """
    Plurality index for verb agreement: 1 when the gender takes a plural
    verb ("they eat"), else 0 ("she eats").
    """
    return 1 if clamp_gender(gender) == Gender.PLURAL else 0


def pluralize_pronoun(word: str, count: int) -> str:
    """Pluralize "it" to "them" for count != 1; other words pass through."""
    if count != 1 and word.lower() == "it":
        return "them"
    return word


__all__ = [
    "Gender",
    "GENDER_NAMES",
    "clamp_gender",
    "gender_name",
    "possessive_pronoun",
    "possessive_determiner",
    "personal_pronoun",
    "objective_pronoun",
    "reflexive_pronoun",
    "verb_plurality",
    "pluralize_pronoun",
]
