import os

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Settings read the environment lazily; force the sqlite fallback before any
# mailroom module caches a database URL.
os.environ.setdefault("PYTEST_RUNNING", "1")

from mailroom import domain  # noqa: E402
from mailroom.config import refresh_settings_cache  # noqa: E402
from mailroom.support.container import Container  # noqa: E402
import mailroom.database.factories  # noqa: E402,F401 - registers factory types
from mailroom.database.factories import factory_types  # noqa: E402

_ENV_VARS = (
    "DATABASE_URL",
    "MAILROOM_TEST_DB",
    "POSTGRES_USER",
    "POSTGRES_PASSWORD",
    "POSTGRES_HOST",
    "POSTGRES_PORT",
    "POSTGRES_DB",
    "LOG_LEVEL",
    "SQL_ECHO",
)


@pytest.fixture
def clean_env(monkeypatch):
    """Clear database/logging env + cached settings so each test starts from defaults."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    refresh_settings_cache()
    yield monkeypatch
    refresh_settings_cache()


@pytest.fixture(scope="session")
def engine():
    eng = create_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    domain.BaseModel.metadata.create_all(bind=eng)
    yield eng
    domain.BaseModel.metadata.drop_all(bind=eng)
    eng.dispose()


@pytest.fixture
def db_session(engine):
    Session = sessionmaker(bind=engine, autoflush=False, autocommit=False)
    db = Session()
    try:
        yield db
    finally:
        db.close()
        # Truncate all tables between tests without dropping metadata.
        with engine.begin() as connection:
            for table in reversed(domain.BaseModel.metadata.sorted_tables):
                connection.execute(table.delete())


@pytest.fixture
def container():
    return Container(registry=factory_types)


@pytest.fixture
def bare_container():
    """Container without the factory type registry."""
    return Container()
