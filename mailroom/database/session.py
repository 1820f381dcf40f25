"""
Database engine and session management.

Builds the SQLAlchemy engine from :mod:`mailroom.config` settings. In-memory
SQLite (the pytest fallback) uses ``StaticPool`` so every connection sees the
same schema.
"""
from __future__ import annotations

import logging
from typing import Iterator, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from mailroom.config import Settings, get_settings

logger = logging.getLogger(__name__)

_engine: Optional[Engine] = None
_session_factory: Optional[sessionmaker] = None


def build_engine(settings: Settings) -> Engine:
    kwargs = {"echo": settings.sql_echo}
    if settings.is_sqlite:
        kwargs["connect_args"] = {"check_same_thread": False}
    if settings.is_memory_sqlite:
        kwargs["poolclass"] = StaticPool
    engine = create_engine(settings.database_url, **kwargs)
    logger.info("db_engine_created: dialect=%s", engine.dialect.name)
    return engine


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_engine() -> Engine:
    global _engine
    if _engine is None:
        _engine = build_engine(get_settings())
    return _engine


def get_session_factory() -> sessionmaker:
    global _session_factory
    if _session_factory is None:
        _session_factory = build_session_factory(get_engine())
    return _session_factory


def create_schema(engine: Optional[Engine] = None) -> None:
    """Create all model tables on ``engine`` (the process engine by default)."""
    from mailroom.domain.shared.models.base import BaseModel
    import mailroom.domain  # noqa: F401 - registers every model on the metadata

    BaseModel.metadata.create_all(bind=engine or get_engine())


def get_db() -> Iterator[Session]:
    """Yield a session and close it when the caller is done."""
    db = get_session_factory()()
    try:
        yield db
    finally:
        db.close()


def reset_engine() -> None:
    """Dispose the process engine so the next call rebuilds it from settings."""
    global _engine, _session_factory
    if _engine is not None:
        _engine.dispose()
    _engine = None
    _session_factory = None
