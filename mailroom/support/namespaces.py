"""Namespace view of Python classes.

Models and factories are addressed by a PascalCase namespace path built from
their module location below the top-level package, e.g.
``mailroom.domain.accounting.reports.models.report.Report`` becomes
``("Domain", "Accounting", "Reports", "Models", "Report", "Report")``.
"""
from __future__ import annotations

from typing import Sequence, Tuple

NamespacePath = Tuple[str, ...]

SEPARATOR = "."


def pascal_case(segment: str) -> str:
    """Return ``sample_model`` as ``SampleModel``; already-cased input is kept."""
    parts = [p for p in segment.split("_") if p]
    return "".join(p[:1].upper() + p[1:] for p in parts)


def namespace_path_for(cls: type) -> NamespacePath:
    """Return the namespace path of ``cls``.

    A class may pin its path with a ``__namespace__`` attribute; otherwise the
    first module segment (the distribution package) is dropped and the rest
    are PascalCased.

    Only the class's own ``__namespace__`` counts, so a subclass of a pinned
    class is located by its own module and name.
    """
    declared = cls.__dict__.get("__namespace__")
    if isinstance(declared, str):
        raise TypeError(
            f"{cls.__qualname__}.__namespace__ must be a sequence of segments, not a dotted string"
        )
    if declared:
        return tuple(declared)
    module_segments = cls.__module__.split(SEPARATOR)[1:]
    return tuple(pascal_case(s) for s in module_segments) + (cls.__name__,)


def join_namespace(segments: Sequence[str]) -> str:
    return SEPARATOR.join(segments)
