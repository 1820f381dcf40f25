"""
Framework-level helpers shared by models and factories: the service
container, the namespace view of classes and the factory resolver.
"""

from .container import (
    BindingResolutionError,
    CircularDependencyError,
    Container,
    ContainerError,
    TypeRegistry,
)
from .factory_resolver import (
    FACTORIES_ROOT,
    MalformedNamespaceError,
    UnresolvedFactoryError,
    derive_factory_identifier,
    resolve_factory,
)
from .namespaces import NamespacePath, namespace_path_for

__all__ = [
    # container
    "Container",
    "TypeRegistry",
    "ContainerError",
    "BindingResolutionError",
    "CircularDependencyError",
    # factory resolution
    "FACTORIES_ROOT",
    "MalformedNamespaceError",
    "UnresolvedFactoryError",
    "derive_factory_identifier",
    "resolve_factory",
    # namespaces
    "NamespacePath",
    "namespace_path_for",
]
