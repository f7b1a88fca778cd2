"""
Champs dérivés calculés à la lecture (jamais persistés).
"""

from datetime import date, datetime
from typing import Optional

from app.core.validators import STATUS_ACTIVE, STATUS_COMPLETED, STATUS_DROPPED, STATUS_PENDING

NO_TEACHER = "Aucun enseignant"
UNKNOWN_STUDENT = "Étudiant inconnu"
UNKNOWN_COURSE = "Cours inconnu"
PASSING_GRADE = 10

# Bornes basses inclusives, de la meilleure mention à la plus faible
MENTION_BANDS = (
    (16, "Très bien"),
    (14, "Bien"),
    (12, "Assez bien"),
    (10, "Passable"),
)
FAILING_MENTION = "Insuffisant"


def full_name(first_name: Optional[str], last_name: Optional[str]) -> str:
    return f"{first_name or ''} {last_name or ''}"


def age(birth_date: Optional[date], today: date) -> Optional[int]:
    """Âge en années révolues à la date `today` ; None sans date de naissance."""
    if birth_date is None:
        return None
    if isinstance(birth_date, datetime):
        birth_date = birth_date.date()
    years = today.year - birth_date.year
    if (today.month, today.day) < (birth_date.month, birth_date.day):
        years -= 1
    return max(years, 0)


def mention(grade: Optional[float]) -> Optional[str]:
    if grade is None:
        return None
    for lower_bound, label in MENTION_BANDS:
        if grade >= lower_bound:
            return label
    return FAILING_MENTION


def is_passed(grade: Optional[float]) -> bool:
    return grade is not None and grade >= PASSING_GRADE


def is_full(max_capacity: Optional[int], enrollment_count: int) -> bool:
    """Sans capacité maximale, un cours n'est jamais complet."""
    if max_capacity is None:
        return False
    return enrollment_count >= max_capacity


def course_full_display(
    code: str,
    name: str,
    semester: str,
    year: int,
    teacher_full_name: Optional[str] = None,
) -> str:
    return f"{code} - {name} ({semester} {year}) - {teacher_full_name or NO_TEACHER}"


def enrollment_full_display(
    student_full_name: Optional[str],
    course_name: Optional[str],
    course_code: Optional[str],
    status: str,
    grade: Optional[float] = None,
) -> str:
    """Ex. : « Jean Martin inscrit à Algèbre Linéaire (MATH201) - Statut: Actif - Note: 14.5/20 »."""
    display = (
        f"{student_full_name or UNKNOWN_STUDENT} inscrit à {course_name or UNKNOWN_COURSE} "
        f"({course_code or ''}) - Statut: {status}"
    )
    if grade is not None:
        display += f" - Note: {grade:.1f}/20"
    return display


def is_active(status: Optional[str]) -> bool:
    return status == STATUS_ACTIVE


def is_completed(status: Optional[str]) -> bool:
    return status == STATUS_COMPLETED


def is_dropped(status: Optional[str]) -> bool:
    return status == STATUS_DROPPED


def is_pending(status: Optional[str]) -> bool:
    return status == STATUS_PENDING
