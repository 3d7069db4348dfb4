# tests/test_verbs.py
"""
tests/test_verbs.py
-------------------

Unit tests for :func:`morphology.verbs.pluralize_verb`.
"""

from __future__ import annotations

import pytest
from structlog.testing import capture_logs

from lexicon.irregulars import IrregularTables
from morphology.rules import first_match
from morphology.verbs import VERB_RULES, pluralize_verb


@pytest.mark.parametrize(
    "singular, plural",
    [
        # undo -es
        ("hisses", "hiss"),
        ("assesses", "assess"),
        ("catches", "catch"),
        ("teaches", "teach"),
        ("mashes", "mash"),
        ("bashes", "bash"),
        ("relaxes", "relax"),
        ("razzes", "razz"),
        ("fuzzes", "fuzz"),
        ("wrenches", "wrench"),
        ("blesses", "bless"),
        # consonant + ies
        ("glorifies", "glorify"),
        ("allies", "ally"),
        ("bloodies", "bloody"),
        ("parries", "parry"),
        ("flies", "fly"),
        # vowel + ys
        ("stays", "stay"),
        ("toys", "toy"),
        ("assays", "assay"),
        # plain -s
        ("eats", "eat"),
        ("steals", "steal"),
        ("moans", "moan"),
    ],
)
def test_rule_cascade(singular: str, plural: str) -> None:
    """Each converse -s rule yields the plural-subject form."""
    assert pluralize_verb(singular) == plural


def test_unmatched_verb_is_returned_unchanged() -> None:
    """No dictionary entry and no rule: the word comes back as-is."""
    assert pluralize_verb("squigglfonox") == "squigglfonox"
    assert pluralize_verb("test") == "test"
    assert pluralize_verb("") == ""


def test_unmatched_verb_is_logged() -> None:
    """A debug event suggests adding the verb to the dictionary."""
    with capture_logs() as logs:
        pluralize_verb("squigglfonox")

    events = [entry for entry in logs if entry["event"] == "verb_unmatched"]
    assert len(events) == 1
    assert events[0]["word"] == "squigglfonox"
    assert events[0]["log_level"] == "debug"


def test_matched_verb_is_not_logged() -> None:
    with capture_logs() as logs:
        pluralize_verb("eats")
    assert not [entry for entry in logs if entry["event"] == "verb_unmatched"]


def test_dictionary_wins_over_rules(tables: IrregularTables) -> None:
    assert pluralize_verb("has", tables) == "have"
    assert pluralize_verb("isn't", tables) == "aren't"
    assert pluralize_verb("does", tables) == "do"
    assert pluralize_verb("does") == "doe"


def test_dictionary_lookup_is_case_insensitive(tables: IrregularTables) -> None:
    assert pluralize_verb("IS", tables) == "are"
    assert pluralize_verb("Has", tables) == "have"


def test_shipped_verbs(shipped_tables: IrregularTables) -> None:
    assert pluralize_verb("is", shipped_tables) == "are"
    assert pluralize_verb("goes", shipped_tables) == "go"
    assert pluralize_verb("doesn't", shipped_tables) == "don't"
    assert pluralize_verb("eats", shipped_tables) == "eat"


def test_suffix_tests_ignore_case() -> None:
    assert pluralize_verb("CATCHES") == "CATCH"
    assert pluralize_verb("EATS") == "EAT"
    assert pluralize_verb("STAYS") == "STAY"
    assert pluralize_verb("Glorifies") == "Glorify"


def test_short_inputs() -> None:
    """'ies' alone is too short for the -ies rule and falls to plain -s."""
    assert pluralize_verb("ies") == "ie"
    assert pluralize_verb("ys") == "y"
    assert pluralize_verb("s") == ""


def test_vowel_before_ies_keeps_ie() -> None:
    """'-ies' after a vowel is not the consonant + y pattern."""
    assert first_match("queies", VERB_RULES).name == "drop_s"


def test_none_is_returned_for_none() -> None:
    assert pluralize_verb(None) is None
