from __future__ import annotations

from typing import Generator

import pytest
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from greenacre import models  # noqa: F401  (registers tables on Base.metadata)
from greenacre.db import Base, create_db_engine, make_session_factory


@pytest.fixture(autouse=True)
def seed_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep tests fast and away from any real database or production guard."""
    monkeypatch.setenv("SEED_BCRYPT_ROUNDS", "4")
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.delenv("SEED_ALLOW_PRODUCTION", raising=False)


@pytest.fixture()
def database_url(tmp_path) -> str:
    return f"sqlite:///{tmp_path / 'greenacre.db'}"


@pytest.fixture()
def engine(database_url: str) -> Generator[Engine, None, None]:
    """File-backed SQLite engine with the full schema created."""
    engine = create_db_engine(database_url)
    Base.metadata.create_all(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture()
def db(engine: Engine) -> Generator[Session, None, None]:
    """Create a database session for testing."""
    session = make_session_factory(engine)()
    try:
        yield session
    finally:
        session.rollback()
        session.close()
