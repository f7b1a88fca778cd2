"""
Schémas Pydantic pour les enseignants.
"""

from datetime import datetime
from typing import Optional

from app.schemas.base import CamelModel


class TeacherCreate(CamelModel):
    """
    Corps de POST /teachers.
    Tous les champs sont optionnels ici : les champs obligatoires manquants sont
    signalés par le vérificateur, avec toutes les autres violations.
    """
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    speciality: Optional[str] = None


class TeacherUpdate(TeacherCreate):
    """Corps de PUT /teachers/{id} — seules les clés présentes sont appliquées."""


class TeacherSummary(CamelModel):
    """Enseignant embarqué dans la réponse d'un cours."""
    id: int
    first_name: str
    last_name: str
    full_name: str
    email: str


class TeacherResponse(CamelModel):
    id: int
    first_name: str
    last_name: str
    full_name: str
    email: str
    phone: Optional[str]
    speciality: str
    course_count: int
    created_at: datetime
    updated_at: datetime
