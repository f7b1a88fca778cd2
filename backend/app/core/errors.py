"""
Erreurs métier levées par les services et converties en réponses HTTP dans app.main.
"""

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class Violation:
    """Une règle non respectée sur un champ (nom de champ Python, message lisible)."""
    field: str
    message: str


class DomainError(Exception):
    """Base commune des erreurs récupérables à la frontière HTTP."""


class ValidationFailure(DomainError):
    """Une ou plusieurs violations de règles, toujours rapportées ensemble."""

    def __init__(self, violations: List[Violation]):
        self.violations = list(violations)
        super().__init__("; ".join(v.message for v in self.violations))


class ReferenceNotFound(ValidationFailure):
    """Un identifiant référencé (enseignant, étudiant, cours) n'existe pas."""


class NotFound(DomainError):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class DeleteConflict(DomainError):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)
