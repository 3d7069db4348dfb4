# app/shared/container.py
from typing import Iterator

from dependency_injector import containers, providers

from app.shared.config import Settings, settings
from nlg.api import Pluralizer


def pluralizer_resource(config: Settings) -> Iterator[Pluralizer]:
    """Build the tables on init_resources(), close them on shutdown_resources()."""
    plural = Pluralizer.from_settings(config)
    try:
        yield plural
    finally:
        plural.close()


class Container(containers.DeclarativeContainer):
    """
    Dependency Injection Container.
    Owns the Pluralizer and the irregular-form tables bound to it.
    """

    config = providers.Object(settings)

    # Built once, shared by every consumer, closed on shutdown.
    pluralizer = providers.Resource(pluralizer_resource, config=config)
