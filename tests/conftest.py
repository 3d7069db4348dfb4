# tests/conftest.py
from pathlib import Path

import pytest

from app.shared.config import Settings
from lexicon.irregulars import IrregularTables, build_irregular_tables
from nlg.api import Pluralizer
from utils.logging_setup import init_logging

NOUNS_TXT = """\
person   people
Fish     FISH
bus      buses
quiz     quizzes
beau     beaux
"""

VERBS_TXT = """\
has     have
isn't   aren't
does    do
Is      ARE
"""


@pytest.fixture(scope="session", autouse=True)
def _configure_logging() -> None:
    """Route structlog through stdlib logging on stderr, as the CLI does."""
    init_logging(force=True)


@pytest.fixture(scope="function")
def lexicon_dir(tmp_path: Path) -> Path:
    """A small pair of dictionary files written to a temp directory."""
    (tmp_path / "plural_nouns.txt").write_text(NOUNS_TXT, encoding="utf-8")
    (tmp_path / "plural_verbs.txt").write_text(VERBS_TXT, encoding="utf-8")
    return tmp_path


@pytest.fixture(scope="function")
def test_settings(lexicon_dir: Path) -> Settings:
    return Settings(LEXICON_DIR=str(lexicon_dir))


@pytest.fixture(scope="function")
def tables(test_settings: Settings) -> IrregularTables:
    """Tables built from the temp dictionary files."""
    return build_irregular_tables(test_settings)


@pytest.fixture(scope="session")
def shipped_tables() -> IrregularTables:
    """Tables built from the dictionaries shipped in lexicon/data."""
    return build_irregular_tables(Settings())


@pytest.fixture
def plural(shipped_tables: IrregularTables) -> Pluralizer:
    return Pluralizer(shipped_tables)
