"""
Schémas Pydantic pour les étudiants.
"""

from datetime import date, datetime
from typing import Optional

from app.schemas.base import CamelModel


class StudentCreate(CamelModel):
    """Corps de POST /students. studentNumber est généré s'il n'est pas fourni."""
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    birth_date: Optional[date] = None
    address: Optional[str] = None
    student_number: Optional[str] = None


class StudentUpdate(StudentCreate):
    """Corps de PUT /students/{id} — seules les clés présentes sont appliquées."""


class StudentSummary(CamelModel):
    """Étudiant embarqué dans la réponse d'une inscription."""
    id: int
    first_name: str
    last_name: str
    full_name: str
    email: str
    student_number: Optional[str]


class StudentResponse(CamelModel):
    id: int
    first_name: str
    last_name: str
    full_name: str
    email: str
    phone: Optional[str]
    birth_date: Optional[date]
    age: Optional[int]
    address: Optional[str]
    student_number: Optional[str]
    enrollment_count: int
    created_at: datetime
    updated_at: datetime
