"""
Configuration partagée pour tous les tests.

- `client` : BDD mockée (MagicMock), pour les tests de routers qui patchent les services.
- `db_session` / `sqlite_client` : base SQLite en mémoire, pour les services et le parcours complet.
"""

import random
from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import app.models  # noqa: F401 — enregistre toutes les tables
from app.core.clock import FixedClock, get_clock, get_rng
from app.database import Base, get_db
from app.main import app

NOW = datetime(2025, 3, 15, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def client():
    """Client HTTP de test avec la BDD mockée."""
    mock_db = MagicMock()
    app.dependency_overrides[get_db] = lambda: mock_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def clock():
    """Horloge figée au 15 mars 2025, 9h30 UTC."""
    return FixedClock(NOW)


@pytest.fixture
def rng():
    return random.Random(42)


@pytest.fixture
def db_session():
    """Session sur une base SQLite en mémoire, recréée pour chaque test."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def sqlite_client(db_session, clock, rng):
    """Client HTTP branché sur la base SQLite en mémoire, avec horloge et aléa déterministes."""
    app.dependency_overrides[get_db] = lambda: db_session
    app.dependency_overrides[get_clock] = lambda: clock
    app.dependency_overrides[get_rng] = lambda: rng
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
