"""Mailing-list backend: domain models, factories and the service container."""

__version__ = "0.1.0"
