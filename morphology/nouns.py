"""
morphology/nouns.py

English noun pluralization.

Two entry points:

- `pluralize_noun(word, count)` works on a single word:

      pluralize_noun("knife", 2)   -> "knives"
      pluralize_noun("city", 2)    -> "cities"

- `pluralize_noun_phrase(phrase, count)` turns an indefinite noun phrase into
  a counted one, pluralizing the head noun only:

      pluralize_noun_phrase("a short sword", 6)     -> "six short swords"
      pluralize_noun_phrase("a bag of holding", 2)  -> "two bags of holding"

Lookups go to the irregular noun table first; everything else is derived from
a suffix-rule cascade (see `NOUN_RULES`). The rules are heuristics and will
sometimes produce odd plurals ("virus" -> "viri"); add an entry to
`lexicon/data/plural_nouns.txt` when that matters.
"""

from __future__ import annotations

from typing import Optional, Tuple

from app.shared.config import settings
from lexicon.irregulars import IrregularTables
from morphology.numbers import spell
from morphology.rules import (
    SuffixRule,
    always,
    append,
    apply_cascade,
    char_from_end,
    ends_with,
    ends_with_but_not,
    is_vowel,
    replace_tail,
)
from utils.bounded import BoundedBuffer


def _vowel_before_y(lowered: str) -> bool:
    return lowered.endswith("y") and is_vowel(char_from_end(lowered, 2))


# First match wins; keep the order.
NOUN_RULES: Tuple[SuffixRule, ...] = (
    # boss -> bosses, brush -> brushes, fox -> foxes, potato -> potatoes
    SuffixRule("sibilant", ends_with("ss", "sh", "ch", "x", "o", "z"), append("es")),
    # knife -> knives
    SuffixRule("fe_to_ves", ends_with("fe"), replace_tail(2, "ves")),
    # leaf -> leaves, but bluff -> bluffs
    SuffixRule("f_to_ves", ends_with_but_not("f", "ff"), replace_tail(1, "ves")),
    # day -> days
    SuffixRule("vowel_y", _vowel_before_y, append("s")),
    # city -> cities
    SuffixRule("consonant_y", ends_with("y"), replace_tail(1, "ies")),
    # cactus -> cacti
    SuffixRule("us_to_i", ends_with("us"), replace_tail(2, "i")),
    # analysis -> analyses
    SuffixRule("is_to_es", ends_with("is"), replace_tail(2, "es")),
    # gas -> gases
    SuffixRule("s_to_ses", ends_with("s"), append("es")),
    SuffixRule("default", always, append("s")),
)

ARTICLES: Tuple[str, ...] = ("a ", "an ", "the ", "one ")
PREPOSITION = " of "
BLANKS = " \t"


def pluralize_noun(
    word: Optional[str],
    count: int,
    irregulars: Optional[IrregularTables] = None,
) -> Optional[str]:
    """
    Pluralize a single English noun for `count`.

    Returns `word` unchanged when count is exactly 1, and None for None.
    The empty string goes through the cascade like any other word and
    comes back as "s". Only works on single words; see
    `pluralize_noun_phrase` for phrases.
    """
    if word is None:
        return None

    if count == 1:
        return word

    tables = irregulars or IrregularTables.empty()
    irregular = tables.nouns.lookup(word)
    if irregular is not None:
        return irregular

    # NOUN_RULES ends with a catch-all, so a rule always fires.
    return apply_cascade(word, NOUN_RULES)


def _skip_articles(phrase: str, pos: int) -> int:
    # Each article is tried once, in order, from where the previous one ended.
    for article in ARTICLES:
        if phrase[pos : pos + len(article)].lower() == article:
            pos += len(article)
    return pos


def _at_preposition(phrase: str, pos: int) -> bool:
    return phrase[pos : pos + len(PREPOSITION)].lower() == PREPOSITION


def pluralize_noun_phrase(
    phrase: Optional[str],
    count: int,
    irregulars: Optional[IrregularTables] = None,
    capacity: Optional[int] = None,
) -> Optional[str]:
    """
    Turn a singular noun phrase into a counted phrase.

    Steps:
      1. Leading blanks are kept.
      2. Leading articles are dropped: "a ", "an ", "the " and "one " are
         checked in that order, each at most once ("the one ring" -> "ring").
      3. For count >= 0 the spelled-out count is written, including
         "zero" for 0. Negative counts write no number.
      4. The text up to " of " (or the end) is copied and its last word is
         replaced by its plural for `count`.
      5. The " of ..." clause is copied unchanged.

    Output longer than `capacity - 1` characters (default
    settings.MAX_STRING_LENGTH) is truncated.
    """
    if phrase is None:
        return None

    buf = BoundedBuffer(settings.MAX_STRING_LENGTH if capacity is None else capacity)
    end = len(phrase)
    pos = 0

    while pos < end and phrase[pos] in BLANKS:
        buf.write(phrase[pos])
        pos += 1

    pos = _skip_articles(phrase, pos)

    if count >= 0:
        buf.write(spell(count) + " ")

    # Copy up to " of ", remembering where the last word starts.
    head_start = len(buf)
    while pos < end and not _at_preposition(phrase, pos) and not buf.full:
        char = phrase[pos]
        buf.write(char)
        pos += 1
        if char in BLANKS:
            head_start = len(buf)

    head = buf.rewind(head_start)
    buf.write(pluralize_noun(head, count, irregulars) or "")

    buf.write(phrase[pos:])
    return buf.getvalue()


__all__ = ["NOUN_RULES", "ARTICLES", "pluralize_noun", "pluralize_noun_phrase"]
