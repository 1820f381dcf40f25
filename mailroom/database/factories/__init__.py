"""
Model factories.

Importing this package registers every factory in ``factory_types``; the
imports below exist for that side effect as much as for re-export.
"""

from .base import Factory, factory_types, registered_factories
from .shared import UserFactory
from .subscriber import SubscriberFactory, TagFactory
from .accounting import ReportFactory
from .sample import SampleModelFactory

__all__ = [
    "Factory",
    "factory_types",
    "registered_factories",
    "UserFactory",
    "SubscriberFactory",
    "TagFactory",
    "ReportFactory",
    "SampleModelFactory",
]
