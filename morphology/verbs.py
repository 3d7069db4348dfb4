"""
morphology/verbs.py

Subject-verb agreement for English present-tense verbs.

`pluralize_verb` takes the third-person singular form ("he catches") and
returns the form used with plural subjects ("they catch"):

    pluralize_verb("hisses")     -> "hiss"
    pluralize_verb("glorifies")  -> "glorify"
    pluralize_verb("stays")      -> "stay"
    pluralize_verb("eats")       -> "eat"

The rules below are the converse of the usual "how to form the -s form"
rules. Verbs they get wrong ("does", "goes", "is") belong in
`lexicon/data/plural_verbs.txt`.
"""

from __future__ import annotations

from typing import Optional, Tuple

import structlog

from lexicon.irregulars import IrregularTables
from morphology.rules import (
    SuffixRule,
    apply_cascade,
    char_from_end,
    ends_with,
    is_vowel,
    replace_tail,
)

logger = structlog.get_logger()


def _consonant_ies(lowered: str) -> bool:
    return (
        len(lowered) >= 4
        and lowered.endswith("ies")
        and not is_vowel(char_from_end(lowered, 4))
    )


def _vowel_ys(lowered: str) -> bool:
    return (
        len(lowered) >= 3
        and lowered.endswith("ys")
        and is_vowel(char_from_end(lowered, 3))
    )


# First match wins; keep the order. No catch-all: an unmatched verb is
# returned unchanged by pluralize_verb().
VERB_RULES: Tuple[SuffixRule, ...] = (
    # relaxes -> relax, hisses -> hiss, bashes -> bash, catches -> catch,
    # fuzzes -> fuzz
    SuffixRule(
        "undo_es",
        ends_with("xes", "sses", "shes", "ches", "tches", "zzes"),
        replace_tail(2),
    ),
    # glorifies -> glorify
    SuffixRule("ies_to_y", _consonant_ies, replace_tail(3, "y")),
    # stays -> stay
    SuffixRule("vowel_ys", _vowel_ys, replace_tail(1)),
    # eats -> eat
    SuffixRule("drop_s", ends_with("s"), replace_tail(1)),
)


def pluralize_verb(
    word: Optional[str],
    irregulars: Optional[IrregularTables] = None,
) -> Optional[str]:
    """
    Return the plural-subject form of a third-person singular verb.

    Words that neither appear in the irregular verb table nor match a rule
    are returned unchanged (and logged, as a hint to extend the table).

    Suffix tests ignore case, the same as the noun rules, so shouted text
    agrees too: "EATS" -> "EAT". The stem keeps the caller's casing.
    """
    if word is None:
        return None

    tables = irregulars or IrregularTables.empty()
    irregular = tables.verbs.lookup(word)
    if irregular is not None:
        return irregular

    derived = apply_cascade(word, VERB_RULES)
    if derived is None:
        logger.debug(
            "verb_unmatched",
            word=word,
            hint="not in the irregular verb table and no rule applied",
        )
        return word
    return derived


__all__ = ["VERB_RULES", "pluralize_verb"]
