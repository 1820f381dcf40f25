"""
Application assembly: logging and the service container.

The container is built explicitly and handed to whatever needs it; nothing
in the package looks it up globally.
"""
import logging
from typing import Optional

from mailroom.config import Settings, get_settings
from mailroom.support.container import Container, TypeRegistry

logger = logging.getLogger(__name__)

SETTINGS_KEY = "settings"
SESSION_FACTORY_KEY = "db.session_factory"


def configure_logging(settings: Optional[Settings] = None) -> None:
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level)
    logging.getLogger("mailroom").setLevel(settings.log_level)
    logger.info("app_startup: log_level=%s", settings.log_level_name)


def create_container(
    settings: Optional[Settings] = None,
    registry: Optional[TypeRegistry] = None,
) -> Container:
    """Build a container wired with settings, the session factory and factory types.

    ``registry`` defaults to the registry every factory class registers
    itself in; importing the factories package populates it.
    """
    if registry is None:
        from mailroom.database.factories import factory_types

        registry = factory_types

    container = Container(registry=registry)
    container.instance(SETTINGS_KEY, settings or get_settings())

    def _session_factory(c: Container):
        from mailroom.database.session import build_engine, build_session_factory

        return build_session_factory(build_engine(c.resolve(SETTINGS_KEY)))

    container.singleton(SESSION_FACTORY_KEY, _session_factory)
    logger.debug("container_ready: factory_types=%d", len(registry))
    return container
