"""Runtime settings sourced from the environment."""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

SQLITE_MEMORY_URL = "sqlite+pysqlite:///:memory:"

_POSTGRES_VARS = ("POSTGRES_USER", "POSTGRES_PASSWORD", "POSTGRES_HOST", "POSTGRES_PORT", "POSTGRES_DB")


@dataclass(frozen=True)
class Settings:
    database_url: str
    log_level: int
    log_level_name: str
    sql_echo: bool = False

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    @property
    def is_memory_sqlite(self) -> bool:
        return self.is_sqlite and ":memory:" in self.database_url


def _normalize_bool(value: Optional[str], default: bool = False) -> bool:
    """Return normalized boolean from environment-style value."""
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"", "0", "false", "no", "off"}:
        return False
    if normalized in {"1", "true", "yes", "on"}:
        return True
    return default


def _is_pytest_runtime() -> bool:
    """Best-effort detection that we're executing under pytest."""
    if os.getenv("PYTEST_RUNNING") == "1":
        return True
    if "PYTEST_CURRENT_TEST" in os.environ:
        return True
    return "pytest" in sys.modules


def _database_url() -> str:
    # Explicit test override wins, then DATABASE_URL, then POSTGRES_* parts.
    explicit_test_db = os.getenv("MAILROOM_TEST_DB")
    if explicit_test_db:
        return explicit_test_db
    if os.getenv("DATABASE_URL"):
        return os.environ["DATABASE_URL"]

    values = {name: os.getenv(name) for name in _POSTGRES_VARS}
    missing = [name for name, value in values.items() if not value]
    if missing:
        if _is_pytest_runtime():
            return SQLITE_MEMORY_URL
        raise ValueError(f"Missing required database environment variables: {', '.join(missing)}")

    return (
        f"postgresql://{values['POSTGRES_USER']}:{values['POSTGRES_PASSWORD']}"
        f"@{values['POSTGRES_HOST']}:{values['POSTGRES_PORT']}/{values['POSTGRES_DB']}"
    )


@lru_cache(maxsize=None)
def get_settings() -> Settings:
    """Return the cached settings for this process."""
    level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level_name, level = "INFO", logging.INFO
    return Settings(
        database_url=_database_url(),
        log_level=level,
        log_level_name=level_name,
        sql_echo=_normalize_bool(os.getenv("SQL_ECHO"), default=False),
    )


def refresh_settings_cache() -> None:
    """Invalidate cached settings (useful for tests)."""
    get_settings.cache_clear()
