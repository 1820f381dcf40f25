"""Convention-based factory lookup.

A model at ``Domain.<Domain>.<...>.<Model>`` is served by the factory
registered as ``Database.Factories.<Domain>.<Model>Factory``. Only the second
segment and the last segment matter; anything in between is ignored so the
convention holds regardless of how deeply a model is nested.
"""
from __future__ import annotations

from typing import Any, Protocol, Sequence

from mailroom.support.container import BindingResolutionError
from mailroom.support.namespaces import join_namespace

FACTORIES_ROOT = ("Database", "Factories")
FACTORY_SUFFIX = "Factory"


class SupportsResolve(Protocol):
    """Anything with ``resolve(abstract)``.

    A missing abstract must be reported by raising
    :class:`~mailroom.support.container.BindingResolutionError`; that is the
    only error translated into :class:`UnresolvedFactoryError`. A plain
    ``KeyError`` from a stub propagates as raised.
    """

    def resolve(self, abstract: str) -> Any: ...


class MalformedNamespaceError(ValueError):
    """Raised when a namespace path has no domain segment."""


class UnresolvedFactoryError(LookupError):
    """Raised when no binding or registered type exists for a factory identifier."""

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(
            f"Unable to resolve factory '{identifier}': not bound in the container and no such type is registered."
        )


def derive_factory_identifier(namespace_path: Sequence[str]) -> str:
    """Return the factory identifier for ``namespace_path``.

    >>> derive_factory_identifier(["Domain", "Accounting", "Reports", "Models", "Report"])
    'Database.Factories.Accounting.ReportFactory'
    """
    if isinstance(namespace_path, str):
        raise MalformedNamespaceError(
            f"Namespace path must be a sequence of segments, got the string {namespace_path!r}"
        )
    segments = list(namespace_path)
    if len(segments) < 2:
        raise MalformedNamespaceError(
            f"Namespace path {segments!r} needs at least a root and a model segment"
        )
    domain = segments[1]
    model_name = segments[-1]
    return join_namespace([*FACTORIES_ROOT, domain, model_name + FACTORY_SUFFIX])


def resolve_factory(namespace_path: Sequence[str], container: SupportsResolve) -> Any:
    """Resolve the factory instance for ``namespace_path`` through ``container``.

    Whatever the container returns is handed back untouched. Only the
    container's not-found error is translated; other container errors
    propagate as raised.
    """
    identifier = derive_factory_identifier(namespace_path)
    try:
        return container.resolve(identifier)
    except BindingResolutionError as exc:
        if exc.abstract != identifier:
            # A dependency of the factory is missing, not the factory itself.
            raise
        raise UnresolvedFactoryError(identifier) from exc
