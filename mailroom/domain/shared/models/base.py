"""
Shared SQLAlchemy base and helpers.

Every domain model derives from :class:`BaseModel`, which adds mass
assignment guarding and conventional factory lookup on top of the
declarative base.
"""
import logging
from datetime import datetime, UTC
from typing import Any

from sqlalchemy.orm import declarative_base

from mailroom.support.factory_resolver import SupportsResolve, resolve_factory
from mailroom.support.namespaces import NamespacePath, namespace_path_for

logger = logging.getLogger(__name__)


def now_utc():
    """Return an aware UTC datetime for default/updated timestamps."""
    return datetime.now(UTC)


Base = declarative_base()


class BaseModel(Base):
    __abstract__ = True

    # Attributes accepted by fill(); everything else is dropped.
    __fillable__ = ()

    @classmethod
    def get_fillable(cls) -> list:
        return list(cls.__fillable__)

    @classmethod
    def namespace_path(cls) -> NamespacePath:
        return namespace_path_for(cls)

    @classmethod
    def factory(cls, container: SupportsResolve) -> Any:
        """Return this model's test-data factory from ``container``."""
        return resolve_factory(cls.namespace_path(), container)

    def fill(self, **attributes: Any) -> "BaseModel":
        fillable = set(self.__fillable__)
        for key, value in attributes.items():
            if key in fillable:
                setattr(self, key, value)
            else:
                logger.debug("mass_assignment_discarded: model=%s attribute=%s", type(self).__name__, key)
        return self
