# tests/test_container.py
"""
tests/test_container.py
-----------------------

Wiring tests: the dependency-injection container and the Pluralizer facade.
"""

from __future__ import annotations

import pytest
from dependency_injector import providers
from structlog.testing import capture_logs

from app.shared.config import Settings
from app.shared.container import Container
from lexicon.irregulars import IrregularTables, IrregularTablesReleased
from morphology.pronouns import Gender
from nlg.api import Pluralizer
from nlg.options import OptionChoice


def _container_for(test_settings: Settings) -> Container:
    container = Container()
    container.config.override(providers.Object(test_settings))
    return container


@pytest.fixture(scope="function")
def container(test_settings: Settings):
    """Container pointed at the temp dictionaries; resources shut down after."""
    container = _container_for(test_settings)
    container.init_resources()
    yield container
    container.shutdown_resources()


def test_container_shares_one_pluralizer(container: Container) -> None:
    plural = container.pluralizer()
    assert isinstance(plural, Pluralizer)
    assert isinstance(plural.tables, IrregularTables)
    assert container.pluralizer() is plural


def test_container_pluralizer_uses_tables(container: Container) -> None:
    plural = container.pluralizer()
    assert plural.noun("person", 2) == "people"
    assert plural.verb("does") == "do"
    assert plural.noun_phrase("a bag of holding", 2) == "two bags of holding"


def test_shutdown_closes_the_pluralizer(test_settings: Settings) -> None:
    container = _container_for(test_settings)
    container.init_resources()
    plural = container.pluralizer()
    assert plural.noun("person", 2) == "people"

    with capture_logs() as logs:
        container.shutdown_resources()

    assert plural.closed
    assert [e for e in logs if e["event"] == "irregulars_released"]
    with pytest.raises(IrregularTablesReleased):
        plural.noun("person", 2)


def test_release_is_logged_once(test_settings: Settings) -> None:
    """Closing the facade before shutdown does not release the tables twice."""
    container = _container_for(test_settings)
    container.init_resources()

    with capture_logs() as logs:
        container.pluralizer().close()
        container.shutdown_resources()

    assert len([e for e in logs if e["event"] == "irregulars_released"]) == 1


def test_pluralizer_operations(plural: Pluralizer) -> None:
    assert plural.spell(42) == "forty-two"
    assert plural.noun("city", 2) == "cities"
    assert plural.noun_phrase("a short sword", 6) == "six short swords"
    assert plural.verb("catches") == "catch"
    assert plural.option("is:are remainder", 1) == OptionChoice("are", 6)
    assert plural.verb_option("(goes) home", 1) == OptionChoice("go", 6)
    assert plural.render("$e $v(is) here", Gender.PLURAL) == "they are here"


def test_pluralizer_capacity_override(plural: Pluralizer) -> None:
    assert plural.option("abcdef", 0, capacity=3).text == "ab"
    assert plural.noun_phrase("a sword", 2, capacity=0) == ""


def test_pluralizer_without_tables_uses_rules_only() -> None:
    plural = Pluralizer()
    assert plural.noun("person", 2) == "persons"
    assert plural.verb("does") == "doe"


def test_closed_pluralizer_refuses_work(test_settings: Settings) -> None:
    with Pluralizer.from_settings(test_settings) as plural:
        assert plural.noun("beau", 2) == "beaux"
        assert not plural.closed

    assert plural.closed
    with pytest.raises(IrregularTablesReleased):
        plural.noun("beau", 2)

    # Closing twice is harmless.
    plural.close()
