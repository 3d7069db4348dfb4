"""
lexicon.normalization
=====================

Key normalization for the irregular-form tables.

Both the dictionary loader and the lookups go through
`normalize_for_lookup`, so the two sides always agree on the canonical key.

Casing is folded with plain `str.lower()`; full Unicode case mapping is out
of scope for the English heuristics. Typographic apostrophes are mapped to
ASCII so that "isn’t" and "isn't" share one entry.

>>> normalize_for_lookup("  Isn’t ")
"isn't"
"""

from __future__ import annotations

__all__ = ["standardize_apostrophes", "normalize_for_lookup"]

# Apostrophe variants that show up in copy/pasted text.
_APOSTROPHE_TABLE = str.maketrans(
    {
        "’": "'",
        "‘": "'",
        "‛": "'",
        "′": "'",
    }
)


def standardize_apostrophes(text: str) -> str:
    """Map typographic apostrophes to "'"."""
    return text.translate(_APOSTROPHE_TABLE)


def normalize_for_lookup(text: str) -> str:
    """
    Canonical dictionary key for `text`.

    Steps: trim surrounding whitespace, standardize apostrophes, lowercase.
    """
    return standardize_apostrophes(text.strip()).lower()
