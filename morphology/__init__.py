"""
morphology
==========

English morphology helpers: noun plurals, verb agreement, number words and
pronoun tables. All functions are pure given an `IrregularTables` snapshot.
"""

from morphology.nouns import pluralize_noun, pluralize_noun_phrase
from morphology.numbers import spell
from morphology.verbs import pluralize_verb

__all__ = ["pluralize_noun", "pluralize_noun_phrase", "pluralize_verb", "spell"]
