"""
lexicon
=======

Irregular-form dictionaries (singular -> plural nouns, 3rd-sg -> plural
verbs) and the key normalization they share.
"""

from lexicon.irregulars import (
    IrregularFormTable,
    IrregularTables,
    LexiconError,
    build_irregular_tables,
    load_irregular_table,
    release_irregular_tables,
)

__all__ = [
    "IrregularFormTable",
    "IrregularTables",
    "LexiconError",
    "build_irregular_tables",
    "load_irregular_table",
    "release_irregular_tables",
]
