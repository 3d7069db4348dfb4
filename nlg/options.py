"""
nlg/options.py

Alternatives expressions used by the message templates.

An alternatives expression packs several wordings into one token:

    is:are remainder
    (is:are)remainder
    ("choice zero":one:"option two") was taken

Alternatives are separated by ':' or ','. A single pair of parentheses may
wrap the list (which then ends at the matching ')'); without parentheses the
list ends at the first space. Double quotes protect ':', ',', '(' , ')' and
spaces; the quote marks themselves are never copied.

`parse_option` picks alternative N out of such a token and reports how many
source characters it consumed, so the template renderer can skip the token.
`resolve_verb_option` does the same for verbs, deriving the plural form with
`morphology.verbs.pluralize_verb` when the token only spells the singular:

    resolve_verb_option("eats with gusto", 1, 64)     -> OptionChoice("eat", 4)
    resolve_verb_option("(is:are) happy", 1, 64)      -> OptionChoice("are", 8)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from lexicon.irregulars import IrregularTables
from morphology.verbs import pluralize_verb
from utils.bounded import BoundedBuffer, clip

OPEN_PAREN = "("
CLOSE_PAREN = ")"
QUOTE = '"'
SEPARATORS = frozenset(":,")
TERMINATOR = " "


@dataclass(frozen=True)
class OptionChoice:
    """
    Result of scanning an alternatives expression.

    Attributes:
        text:
            The selected alternative ("" when the expression has fewer
            alternatives than requested).
        consumed:
            Number of source characters scanned, including a closing ')'
            but not a terminating space.
    """

    text: str
    consumed: int


@dataclass
class OptionScanner:
    """
    Character-at-a-time state machine behind `parse_option`.

    Unbalanced parentheses or quotes are not errors: the scan simply runs to
    the end of the input or to an unquoted, unparenthesized space.
    """

    option: int
    capacity: int
    paren_depth: int = 0
    in_quote: bool = False
    current: int = 0
    consumed: int = 0
    done: bool = False
    _out: BoundedBuffer = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._out = BoundedBuffer(self.capacity)

    def feed(self, char: str) -> bool:
        """
        Advance over one character. Returns False once the expression has
        ended; the character that ended it counts as consumed only if it is
        the closing ')'.
        """
        if self.done:
            return False

        if char == OPEN_PAREN and not self.in_quote:
            self.paren_depth += 1
        elif char == CLOSE_PAREN and not self.in_quote:
            self.paren_depth -= 1
            if self.paren_depth == 0:
                self.consumed += 1
                self.done = True
                return False
        elif char == QUOTE:
            self.in_quote = not self.in_quote
        elif char in SEPARATORS and not self.in_quote:
            self.current += 1
        elif char == TERMINATOR and not self.in_quote and not self.paren_depth:
            self.done = True
            return False
        elif self.current == self.option:
            self._out.write(char)

        self.consumed += 1
        return True

    def result(self) -> OptionChoice:
        return OptionChoice(text=self._out.getvalue(), consumed=self.consumed)


def parse_option(src: Optional[str], option: int, capacity: int) -> OptionChoice:
    """
    Select alternative `option` (0-based) from the expression at the start
    of `src`.

    At most `capacity - 1` characters of the alternative are kept.
    """
    scanner = OptionScanner(option=option, capacity=capacity)
    for char in src or "":
        if not scanner.feed(char):
            break
    return scanner.result()


def count_options(src: Optional[str]) -> int:
    """Number of alternatives in the expression at the start of `src`."""
    # option=-1 never matches, so the scanner only counts separators.
    scanner = OptionScanner(option=-1, capacity=0)
    for char in src or "":
        if not scanner.feed(char):
            break
    return scanner.current + 1


def list_options(src: Optional[str], capacity: int) -> List[str]:
    """Return every alternative of the expression at the start of `src`."""
    return [parse_option(src, i, capacity).text for i in range(count_options(src))]


def resolve_verb_option(
    src: Optional[str],
    plurality: int,
    capacity: int,
    irregulars: Optional[IrregularTables] = None,
) -> OptionChoice:
    """
    Select the verb form for `plurality` (0 singular, 1 plural).

    If the expression supplies that alternative it is used as-is; otherwise
    alternative 0 is taken as the third-person singular form and its plural
    is derived with `pluralize_verb`. `consumed` always comes from the scan
    for the requested alternative.
    """
    requested = parse_option(src, plurality, capacity)
    if requested.text:
        return requested

    singular = parse_option(src, 0, capacity)
    derived = pluralize_verb(singular.text, irregulars) or ""
    return OptionChoice(text=clip(derived, capacity), consumed=requested.consumed)


__all__ = [
    "OptionChoice",
    "OptionScanner",
    "parse_option",
    "count_options",
    "list_options",
    "resolve_verb_option",
]
