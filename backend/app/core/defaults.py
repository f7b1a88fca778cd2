"""
Valeurs initiales des candidats à la création, avant fusion des données reçues.
"""

import random
from typing import Any, Dict

from app.core.clock import Clock
from app.core.validators import STATUS_ACTIVE

STUDENT_NUMBER_PREFIX = "STU"


def generate_student_number(year: int, rng: random.Random) -> str:
    """STU + année sur 4 chiffres + nombre aléatoire 1..9999 sur 4 chiffres (ex. STU20250042)."""
    return f"{STUDENT_NUMBER_PREFIX}{year:04d}{rng.randint(1, 9999):04d}"


def teacher_defaults() -> Dict[str, Any]:
    return {
        "first_name": None,
        "last_name": None,
        "email": None,
        "phone": None,
        "speciality": None,
    }


def student_defaults(clock: Clock, rng: random.Random) -> Dict[str, Any]:
    return {
        "first_name": None,
        "last_name": None,
        "email": None,
        "phone": None,
        "birth_date": None,
        "address": None,
        "student_number": generate_student_number(clock.today().year, rng),
    }


def course_defaults(clock: Clock) -> Dict[str, Any]:
    return {
        "name": None,
        "description": None,
        "code": None,
        "credits": None,
        "max_capacity": None,
        "semester": None,
        "year": clock.today().year,
        "teacher_id": None,
    }


def enrollment_defaults(clock: Clock) -> Dict[str, Any]:
    return {
        "student_id": None,
        "course_id": None,
        "enrollment_date": clock.now(),
        "status": STATUS_ACTIVE,
        "grade": None,
        "notes": None,
    }
