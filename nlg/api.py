# nlg/api.py
"""
High-level facade over the English agreement helpers.

`Pluralizer` binds one `IrregularTables` snapshot so that callers do not have
to thread the tables through every call:

    from nlg.api import Pluralizer

    with Pluralizer.from_settings() as plural:
        plural.noun_phrase("a bag of holding", 2)   # "two bags of holding"
        plural.verb_option("(is:are) here", 1)      # OptionChoice("are", 8)

The free functions in `morphology` and `nlg.options` remain the primary API;
this class only forwards to them.
"""

from __future__ import annotations

from typing import Optional

from app.shared.config import Settings, settings as default_settings
from lexicon.irregulars import (
    IrregularTables,
    IrregularTablesReleased,
    build_irregular_tables,
    release_irregular_tables,
)
from morphology.nouns import pluralize_noun, pluralize_noun_phrase
from morphology.numbers import spell
from morphology.pronouns import Gender, GenderLike
from morphology.verbs import pluralize_verb
from nlg.act import render
from nlg.options import OptionChoice, parse_option, resolve_verb_option


class Pluralizer:
    """English plural / agreement helpers bound to one set of irregular tables."""

    def __init__(
        self,
        tables: Optional[IrregularTables] = None,
        max_string_length: int = default_settings.MAX_STRING_LENGTH,
    ) -> None:
        self._tables: Optional[IrregularTables] = tables or IrregularTables.empty()
        self.max_string_length = max_string_length

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "Pluralizer":
        """Build the tables named by `settings` and bind them."""
        cfg = settings or default_settings
        return cls(build_irregular_tables(cfg), max_string_length=cfg.MAX_STRING_LENGTH)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def tables(self) -> IrregularTables:
        if self._tables is None:
            raise IrregularTablesReleased("Pluralizer tables were already released.")
        return self._tables

    @property
    def closed(self) -> bool:
        return self._tables is None

    def close(self) -> None:
        """Release the bound tables. Further calls raise IrregularTablesReleased."""
        if self._tables is not None:
            release_irregular_tables(self._tables)
            self._tables = None

    def __enter__(self) -> "Pluralizer":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def _capacity(self, capacity: Optional[int]) -> int:
        return self.max_string_length if capacity is None else capacity

    @staticmethod
    def spell(num: int) -> str:
        return spell(num)

    def noun(self, word: Optional[str], count: int) -> Optional[str]:
        return pluralize_noun(word, count, self.tables)

    def noun_phrase(
        self, phrase: Optional[str], count: int, capacity: Optional[int] = None
    ) -> Optional[str]:
        return pluralize_noun_phrase(
            phrase, count, self.tables, self._capacity(capacity)
        )

    def verb(self, word: Optional[str]) -> Optional[str]:
        return pluralize_verb(word, self.tables)

    def option(
        self, src: Optional[str], index: int, capacity: Optional[int] = None
    ) -> OptionChoice:
        return parse_option(src, index, self._capacity(capacity))

    def verb_option(
        self, src: Optional[str], plurality: int, capacity: Optional[int] = None
    ) -> OptionChoice:
        return resolve_verb_option(
            src, plurality, self._capacity(capacity), self.tables
        )

    def render(self, template: str, gender: GenderLike = Gender.NEUTRAL) -> str:
        return render(template, gender, self.tables, self.max_string_length)


__all__ = ["Pluralizer"]
