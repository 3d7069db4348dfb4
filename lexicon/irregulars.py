"""
lexicon/irregulars.py

Irregular-form dictionaries for the English morphology helpers.

Two tables are used at runtime:

    lexicon/data/plural_nouns.txt    singular noun   -> plural noun
    lexicon/data/plural_verbs.txt    3rd-sg verb     -> plural-subject verb

Each file is plain text made of whitespace-separated pairs:

    person   people
    fish     fish
    has      have

Both sides are case-folded on ingestion, and queries are case-folded before
lookup, so "Person" and "PERSON" hit the same entry.

Lifecycle
---------
Tables are built once, never mutated, and released explicitly:

    tables = build_irregular_tables()
    ...
    release_irregular_tables(tables)

`app.shared.container.Container` wires this pair of calls into a
dependency-injector Resource so that callers normally never do it by hand.

Error behaviour
---------------
A missing or unreadable file is *not* fatal: a warning is logged and an
empty table is returned, leaving the suffix-rule cascades fully usable.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Tuple, Union

import structlog

from app.shared.config import Settings, settings as default_settings
from lexicon.normalization import normalize_for_lookup

logger = structlog.get_logger()

PathLike = Union[str, Path]


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class LexiconError(Exception):
    """Base exception for lexicon-related problems."""


class IrregularTablesReleased(LexiconError):
    """Raised when a released table snapshot is used again."""


# ---------------------------------------------------------------------------
# Core data model
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class IrregularFormTable:
    """
    Read-only mapping of case-folded word -> irregular form.

    Attributes:
        entries:
            The word pairs. Wrapped in a MappingProxyType on construction so
            the table cannot be mutated after it is built.
        source:
            Path the table was loaded from, or None for in-memory tables.
    """

    entries: Mapping[str, str] = field(default_factory=dict)
    source: Optional[str] = None

    def __post_init__(self) -> None:
        folded = {
            normalize_for_lookup(key): normalize_for_lookup(value)
            for key, value in dict(self.entries).items()
        }
        object.__setattr__(self, "entries", MappingProxyType(folded))

    def lookup(self, word: Optional[str]) -> Optional[str]:
        """Return the mapped form for `word`, or None when it is not listed."""
        if word is None:
            return None
        return self.entries.get(normalize_for_lookup(word))

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.lookup(word) is not None

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)


EMPTY_TABLE = IrregularFormTable()


@dataclass(frozen=True)
class IrregularTables:
    """The noun and verb tables consulted by the morphology helpers."""

    nouns: IrregularFormTable = EMPTY_TABLE
    verbs: IrregularFormTable = EMPTY_TABLE

    @classmethod
    def empty(cls) -> "IrregularTables":
        return cls()


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------


def _pair_tokens(tokens: List[str]) -> List[Tuple[str, str]]:
    # Tokens pair up two at a time regardless of line breaks; an odd
    # trailing token has no partner and is dropped.
    return [(tokens[i], tokens[i + 1]) for i in range(0, len(tokens) - 1, 2)]


def parse_irregular_pairs(text: str) -> Dict[str, str]:
    """
    Parse "singular plural" pairs from `text`.

    Later pairs win over earlier ones for the same singular.
    """
    pairs: Dict[str, str] = {}
    for singular, plural in _pair_tokens(text.split()):
        pairs[normalize_for_lookup(singular)] = normalize_for_lookup(plural)
    return pairs


def load_irregular_table(path: PathLike) -> IrregularFormTable:
    """
    Load one irregular-form table from `path`.

    Returns an empty table (and logs a warning) if the file cannot be read.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        logger.warning("irregulars_unreadable", path=str(path), error=str(e))
        return IrregularFormTable(source=str(path))

    entries = parse_irregular_pairs(text)
    logger.debug("irregulars_loaded", path=str(path), count=len(entries))
    return IrregularFormTable(entries=entries, source=str(path))


def build_irregular_tables(settings: Optional[Settings] = None) -> IrregularTables:
    """Load the noun and verb tables named by `settings`."""
    cfg = settings or default_settings
    tables = IrregularTables(
        nouns=load_irregular_table(cfg.NOUNS_PATH),
        verbs=load_irregular_table(cfg.VERBS_PATH),
    )
    logger.info(
        "irregulars_built",
        nouns=len(tables.nouns),
        verbs=len(tables.verbs),
    )
    return tables


def release_irregular_tables(tables: IrregularTables) -> None:
    """Teardown counterpart of build_irregular_tables()."""
    logger.info(
        "irregulars_released",
        nouns=len(tables.nouns),
        verbs=len(tables.verbs),
    )


__all__ = [
    "LexiconError",
    "IrregularTablesReleased",
    "IrregularFormTable",
    "IrregularTables",
    "EMPTY_TABLE",
    "parse_irregular_pairs",
    "load_irregular_table",
    "build_irregular_tables",
    "release_irregular_tables",
]
