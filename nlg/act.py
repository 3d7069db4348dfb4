"""
nlg/act.py

Expand agreement codes in a message template.

Supported codes:

    $v<expr>   verb agreeing with the actor (see nlg.options)
    $e         personal pronoun     (he / she / it / they)
    $m         objective pronoun    (him / her / it / them)
    $s         possessive determiner (his / her / its / their)
    $$         a literal "$"

Every other "$x" code is copied through untouched so that an outer message
system can handle it.

    render("$e $v(does) $s own thing.", Gender.PLURAL)
    -> "they do their own thing."
"""

from __future__ import annotations

from typing import Callable, Dict, Optional

from app.shared.config import settings
from lexicon.irregulars import IrregularTables
from morphology.pronouns import (
    Gender,
    GenderLike,
    objective_pronoun,
    personal_pronoun,
    possessive_determiner,
    verb_plurality,
)
from nlg.options import resolve_verb_option

CODE_MARK = "$"
VERB_CODE = "v"

PRONOUN_CODES: Dict[str, Callable[[GenderLike], str]] = {
    "e": personal_pronoun,
    "m": objective_pronoun,
    "s": possessive_determiner,
}


def render(
    template: str,
    gender: GenderLike = Gender.NEUTRAL,
    irregulars: Optional[IrregularTables] = None,
    capacity: Optional[int] = None,
) -> str:
    """Expand $v / $e / $m / $s / $$ codes in `template` for `gender`."""
    capacity = settings.MAX_STRING_LENGTH if capacity is None else capacity
    plurality = verb_plurality(gender)

    out = []
    pos = 0
    end = len(template)

    while pos < end:
        char = template[pos]
        if char != CODE_MARK or pos + 1 >= end:
            out.append(char)
            pos += 1
            continue

        code = template[pos + 1]
        pos += 2

        if code == VERB_CODE:
            choice = resolve_verb_option(template[pos:], plurality, capacity, irregulars)
            out.append(choice.text)
            pos += choice.consumed
        elif code in PRONOUN_CODES:
            out.append(PRONOUN_CODES[code](gender))
        elif code == CODE_MARK:
            out.append(CODE_MARK)
        else:
            out.append(CODE_MARK + code)

    return "".join(out)


__all__ = ["render", "PRONOUN_CODES"]
