"""
Schémas Pydantic pour les inscriptions.
"""

from datetime import datetime
from typing import Optional

from app.schemas.base import CamelModel
from app.schemas.course import CourseSummary
from app.schemas.student import StudentSummary


class EnrollmentCreate(CamelModel):
    """Corps de POST /enrollments. status vaut « Actif » et enrollmentDate l'instant courant par défaut."""
    student_id: Optional[int] = None
    course_id: Optional[int] = None
    enrollment_date: Optional[datetime] = None
    status: Optional[str] = None
    grade: Optional[float] = None
    notes: Optional[str] = None


class EnrollmentUpdate(EnrollmentCreate):
    """Corps de PUT /enrollments/{id} — seules les clés présentes sont appliquées."""


class EnrollmentResponse(CamelModel):
    id: int
    student_id: int
    course_id: int
    student: Optional[StudentSummary]
    course: Optional[CourseSummary]
    enrollment_date: datetime
    status: str
    grade: Optional[float]
    notes: Optional[str]
    mention: Optional[str]
    is_passed: bool
    is_active: bool
    is_completed: bool
    is_dropped: bool
    is_pending: bool
    full_display: str
    created_at: datetime
    updated_at: datetime
