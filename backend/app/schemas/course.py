"""
Schémas Pydantic pour les cours.
"""

from datetime import datetime
from typing import Optional

from app.schemas.base import CamelModel
from app.schemas.teacher import TeacherSummary


class CourseCreate(CamelModel):
    """Corps de POST /courses. year vaut l'année courante s'il est absent."""
    name: Optional[str] = None
    description: Optional[str] = None
    code: Optional[str] = None
    credits: Optional[int] = None
    max_capacity: Optional[int] = None
    semester: Optional[str] = None
    year: Optional[int] = None
    teacher_id: Optional[int] = None


class CourseUpdate(CourseCreate):
    """Corps de PUT /courses/{id} — seules les clés présentes sont appliquées."""


class CourseSummary(CamelModel):
    """Cours embarqué dans la réponse d'une inscription."""
    id: int
    name: str
    code: str
    credits: int
    semester: str
    year: int


class CourseResponse(CamelModel):
    id: int
    name: str
    description: Optional[str]
    code: str
    credits: int
    max_capacity: Optional[int]
    semester: str
    year: int
    teacher_id: int
    teacher: Optional[TeacherSummary]
    enrollment_count: int
    is_full: bool
    full_display: str
    created_at: datetime
    updated_at: datetime
