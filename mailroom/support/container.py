"""
Minimal service container.

Holds three kinds of entries keyed by string abstracts:

- instances, returned verbatim on every resolve
- bindings, built by calling a class or builder (once when shared)
- registered types in a :class:`TypeRegistry`, built fresh on every resolve

Resolution order is instance, binding, registered type. Anything else raises
:class:`BindingResolutionError` naming the abstract.
"""
from __future__ import annotations

import inspect
import logging
import threading
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, List, Optional

logger = logging.getLogger(__name__)


class ContainerError(Exception):
    """Base class for container failures."""


class BindingResolutionError(ContainerError, LookupError):
    """The abstract is neither bound nor a registered type."""

    def __init__(self, abstract: str):
        self.abstract = abstract
        super().__init__(f"Unable to resolve '{abstract}': not bound and no such type is registered.")


class CircularDependencyError(ContainerError):
    """An abstract was requested again while it was still being built."""

    def __init__(self, chain: List[str]):
        self.chain = list(chain)
        super().__init__("Circular dependency while resolving: " + " -> ".join(self.chain))


class TypeRegistry:
    """Explicit registry of concrete types addressable by identifier."""

    def __init__(self) -> None:
        self._types: Dict[str, type] = {}
        self._lock = threading.RLock()

    def register(self, identifier: str, cls: type) -> type:
        with self._lock:
            existing = self._types.get(identifier)
            if existing is not None and existing is not cls:
                logger.warning(
                    "type_registry_override: identifier=%s old=%s new=%s",
                    identifier, existing.__qualname__, cls.__qualname__,
                )
            self._types[identifier] = cls
        return cls

    def unregister(self, identifier: str) -> None:
        with self._lock:
            self._types.pop(identifier, None)

    def has(self, identifier: str) -> bool:
        return identifier in self._types

    def get(self, identifier: str) -> Optional[type]:
        return self._types.get(identifier)

    def instantiate(self, identifier: str) -> Any:
        cls = self._types.get(identifier)
        if cls is None:
            raise BindingResolutionError(identifier)
        return cls()

    def identifiers(self) -> List[str]:
        return sorted(self._types)

    def __contains__(self, identifier: str) -> bool:
        return self.has(identifier)

    def __len__(self) -> int:
        return len(self._types)


@dataclass
class _Binding:
    builder: Callable[["Container"], Any]
    shared: bool


def _as_builder(concrete: Callable[..., Any]) -> Callable[["Container"], Any]:
    """Wrap a class or callable so it is always called with the container.

    Classes and zero-argument callables are called bare; anything accepting a
    positional parameter receives the container.
    """
    if inspect.isclass(concrete):
        return lambda _container: concrete()
    try:
        params = [
            p for p in inspect.signature(concrete).parameters.values()
            if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD, p.VAR_POSITIONAL)
        ]
    except (TypeError, ValueError):  # builtins without a signature
        params = []
    if params:
        return concrete
    return lambda _container: concrete()


class Container:
    def __init__(self, registry: Optional[TypeRegistry] = None) -> None:
        self.registry = registry
        self._instances: Dict[str, Any] = {}
        self._bindings: Dict[str, _Binding] = {}
        self._lock = threading.RLock()
        self._local = threading.local()

    # Registration -------------------------------------------------------

    def bind(self, abstract: str, concrete: Any = None, shared: bool = False) -> None:
        """Bind ``abstract``.

        A callable ``concrete`` is a builder. Any other non-None value is
        stored as an instance and returned verbatim. ``None`` defers to the
        type registry.
        """
        with self._lock:
            self._instances.pop(abstract, None)
            if concrete is None:
                self._bindings[abstract] = _Binding(self._registry_builder(abstract), shared)
            elif callable(concrete):
                self._bindings[abstract] = _Binding(_as_builder(concrete), shared)
            else:
                self._bindings.pop(abstract, None)
                self._instances[abstract] = concrete

    def singleton(self, abstract: str, concrete: Any = None) -> None:
        self.bind(abstract, concrete, shared=True)

    def instance(self, abstract: str, obj: Any) -> Any:
        with self._lock:
            self._bindings.pop(abstract, None)
            self._instances[abstract] = obj
        return obj

    def forget(self, abstract: str) -> None:
        with self._lock:
            self._instances.pop(abstract, None)
            self._bindings.pop(abstract, None)

    def flush(self) -> None:
        with self._lock:
            self._instances.clear()
            self._bindings.clear()

    # Queries ------------------------------------------------------------

    def bound(self, abstract: str) -> bool:
        return abstract in self._instances or abstract in self._bindings

    def has(self, abstract: str) -> bool:
        return self.bound(abstract) or (self.registry is not None and self.registry.has(abstract))

    def __contains__(self, abstract: str) -> bool:
        return self.has(abstract)

    # Resolution ---------------------------------------------------------

    def resolve(self, abstract: str) -> Any:
        if abstract in self._instances:
            return self._instances[abstract]

        binding = self._bindings.get(abstract)
        if binding is not None:
            if binding.shared:
                with self._lock:
                    if abstract in self._instances:
                        return self._instances[abstract]
                    obj = self._build(abstract, binding.builder)
                    self._instances[abstract] = obj
                    return obj
            return self._build(abstract, binding.builder)

        if self.registry is not None and self.registry.has(abstract):
            return self._build(abstract, lambda _c: self.registry.instantiate(abstract))

        raise BindingResolutionError(abstract)

    def _registry_builder(self, abstract: str) -> Callable[["Container"], Any]:
        def _build(_container: "Container") -> Any:
            if self.registry is None:
                raise BindingResolutionError(abstract)
            return self.registry.instantiate(abstract)
        return _build

    def _build(self, abstract: str, builder: Callable[["Container"], Any]) -> Any:
        with self._resolving(abstract):
            logger.debug("container_build: abstract=%s", abstract)
            return builder(self)

    def _stack(self) -> List[str]:
        stack = getattr(self._local, "stack", None)
        if stack is None:
            stack = self._local.stack = []
        return stack

    @contextmanager
    def _resolving(self, abstract: str) -> Iterator[None]:
        stack = self._stack()
        if abstract in stack:
            raise CircularDependencyError(stack + [abstract])
        stack.append(abstract)
        try:
            yield
        finally:
            stack.pop()

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(set(self._instances) | set(self._bindings)))
