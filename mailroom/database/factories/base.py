"""
Test-data factories for domain models.

A factory subclass names its ``model`` and returns default attributes from
``definition()``. Subclasses register themselves in :data:`factory_types`
under the namespace of their own location, so
``mailroom.database.factories.accounting.ReportFactory`` is reachable as
``Database.Factories.Accounting.ReportFactory`` and is found by
:func:`mailroom.support.factory_resolver.resolve_factory` through any
container that carries the registry.

Factories are immutable: ``count()``, ``state()`` and ``after_creating()``
return configured copies.
"""
from __future__ import annotations

import itertools
import logging
from typing import Any, Callable, Dict, List, Optional, Tuple, Type

from sqlalchemy.orm import Session

from mailroom.support.container import TypeRegistry
from mailroom.support.namespaces import join_namespace, namespace_path_for

logger = logging.getLogger(__name__)

factory_types = TypeRegistry()


class Factory:
    model: Optional[Type[Any]] = None

    _sequence: "itertools.count[int]"

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls._sequence = itertools.count(1)
        if cls.model is not None:
            factory_types.register(cls.identifier(), cls)

    def __init__(
        self,
        count: Optional[int] = None,
        states: Tuple[Dict[str, Any], ...] = (),
        after_creating: Tuple[Callable[[Session, Any], None], ...] = (),
    ) -> None:
        self._count = count
        self._states = tuple(states)
        self._after_creating = tuple(after_creating)

    @classmethod
    def identifier(cls) -> str:
        return join_namespace(namespace_path_for(cls))

    def definition(self) -> Dict[str, Any]:
        """Default attributes for one model; every concrete factory overrides this."""
        raise NotImplementedError(f"{type(self).__name__} must define default attributes")

    def sequence(self) -> int:
        """Next value of this factory's per-class counter (starts at 1)."""
        return next(type(self)._sequence)

    # Configuration ------------------------------------------------------

    def _clone(self, **changes: Any) -> "Factory":
        params = {
            "count": self._count,
            "states": self._states,
            "after_creating": self._after_creating,
        }
        params.update(changes)
        return type(self)(**params)

    def count(self, count: int) -> "Factory":
        if count < 0:
            raise ValueError("count must be >= 0")
        return self._clone(count=count)

    def state(self, **attributes: Any) -> "Factory":
        return self._clone(states=self._states + (attributes,))

    def after_creating(self, callback: Callable[[Session, Any], None]) -> "Factory":
        return self._clone(after_creating=self._after_creating + (callback,))

    # Building -----------------------------------------------------------

    def _attributes(self, overrides: Dict[str, Any], db: Optional[Session]) -> Dict[str, Any]:
        attributes = self.definition()
        for state in self._states:
            attributes.update(state)
        attributes.update(overrides)
        for key, value in list(attributes.items()):
            if isinstance(value, Factory):
                # Parent factories are only materialised when persisting;
                # an unsaved parent has no key to reference.
                attributes[key] = value.create(db).id if db is not None else None
        return attributes

    def _times(self, build: Callable[[], Any]) -> Any:
        if self._count is None:
            return build()
        return [build() for _ in range(self._count)]

    def raw(self, **overrides: Any) -> Any:
        """Return attribute dict(s) without building models."""
        return self._times(lambda: self._attributes(overrides, None))

    def make(self, **overrides: Any) -> Any:
        """Build unsaved model instance(s)."""
        return self._times(lambda: self.model(**self._attributes(overrides, None)))

    def create(self, db: Session, **overrides: Any) -> Any:
        """Persist model instance(s) on ``db`` and run after-creating callbacks."""
        def _build():
            obj = self.model(**self._attributes(overrides, db))
            db.add(obj)
            db.commit()
            db.refresh(obj)
            for callback in self._after_creating:
                callback(db, obj)
            logger.debug("factory_created: model=%s id=%s", self.model.__name__, getattr(obj, "id", None))
            return obj

        return self._times(_build)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} count={self._count} states={len(self._states)}>"


def registered_factories() -> List[str]:
    return factory_types.identifiers()
