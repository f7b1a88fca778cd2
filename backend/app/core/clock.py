"""
Sources de temps et d'aléa injectables.

Politique de fuseau : UTC. « Aujourd'hui » est la date UTC de l'instant courant.
"""

import random
from datetime import date, datetime, timezone
from typing import Protocol


class Clock(Protocol):
    def now(self) -> datetime: ...

    def today(self) -> date: ...


class SystemClock:
    def now(self) -> datetime:
        return datetime.now(timezone.utc)

    def today(self) -> date:
        return self.now().date()


class FixedClock:
    """Horloge figée, utilisée par les tests et le chargement de données."""

    def __init__(self, instant: datetime):
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=timezone.utc)
        self.instant = instant

    def now(self) -> datetime:
        return self.instant

    def today(self) -> date:
        return self.instant.date()


def get_clock() -> Clock:
    """Dépendance FastAPI — horloge système (surchargée dans les tests)."""
    return SystemClock()


def get_rng() -> random.Random:
    """Dépendance FastAPI — source d'aléa pour le numéro étudiant."""
    return random.SystemRandom()
