"""
Connexion à la base de données (PostgreSQL en production, SQLite accepté en local).
Une session SQLAlchemy par requête HTTP, fournie par get_db.
"""

import logging
from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.orm import sessionmaker

from app.config import settings

logger = logging.getLogger(__name__)


def _connect_args(url: str) -> dict:
    # SQLite refuse par défaut une connexion partagée entre threads (serveur ASGI)
    if url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


engine = create_engine(
    settings.DATABASE_URL,
    connect_args=_connect_args(settings.DATABASE_URL),
    pool_pre_ping=True,
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """Dépendance FastAPI — fournit une session BDD et la ferme après usage."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def session_scope():
    """
    Session hors requête HTTP (chargement des données de démonstration).
    Annule la transaction en cours si une erreur remonte.
    """
    db = SessionLocal()
    try:
        yield db
    except Exception:
        db.rollback()
        logger.error("Transaction annulée", exc_info=True)
        raise
    finally:
        db.close()
