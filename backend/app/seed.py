"""
Jeu de données de démonstration.
Lancement : python -m app.seed

Crée les tables puis insère 5 enseignants, 15 étudiants, 10 cours et des inscriptions
aléatoires notées. Tout passe par les services : chaque enregistrement respecte les règles.
"""

import logging
import random
from datetime import date, timedelta
from typing import Optional

from sqlalchemy.orm import Session

import app.models  # noqa: F401 — enregistre les tables dans Base.metadata
from app.core.clock import Clock, SystemClock
from app.core.validators import SEMESTERS, STATUSES
from app.database import Base, engine, session_scope
from app.schemas.course import CourseCreate
from app.schemas.enrollment import EnrollmentCreate
from app.schemas.student import StudentCreate
from app.schemas.teacher import TeacherCreate
from app.services import course_service, enrollment_service, student_service, teacher_service

logger = logging.getLogger(__name__)

SPECIALITIES = [
    "Mathématiques",
    "Informatique",
    "Physique",
    "Littérature",
    "Histoire",
    "Chimie",
    "Biologie",
    "Économie",
]

FIRST_NAMES = [
    "Camille", "Lucas", "Léa", "Hugo", "Chloé", "Louis", "Manon", "Gabriel",
    "Inès", "Arthur", "Jade", "Nathan", "Sarah", "Yanis", "Emma", "Karim",
]
LAST_NAMES = [
    "Martin", "Bernard", "Dubois", "Thomas", "Robert", "Richard", "Petit", "Durand",
    "Leroy", "Moreau", "Simon", "Laurent", "Lefebvre", "Michel", "Garcia", "Benali",
]
STREETS = ["Rue de la Paix", "Avenue Victor Hugo", "Boulevard Voltaire", "Rue Nationale", "Place du Marché"]
CITIES = ["Paris", "Lyon", "Lille", "Nantes", "Bordeaux", "Marseille"]

COURSES = [
    {"name": "Algorithmique et Structures de Données", "code": "INFO101", "credits": 6, "speciality": "Informatique"},
    {"name": "Programmation Orientée Objet", "code": "INFO201", "credits": 5, "speciality": "Informatique"},
    {"name": "Base de Données", "code": "INFO301", "credits": 4, "speciality": "Informatique"},
    {"name": "Analyse Mathématique", "code": "MATH101", "credits": 7, "speciality": "Mathématiques"},
    {"name": "Algèbre Linéaire", "code": "MATH201", "credits": 6, "speciality": "Mathématiques"},
    {"name": "Physique Générale", "code": "PHYS101", "credits": 5, "speciality": "Physique"},
    {"name": "Thermodynamique", "code": "PHYS201", "credits": 4, "speciality": "Physique"},
    {"name": "Littérature Française", "code": "LITT101", "credits": 3, "speciality": "Littérature"},
    {"name": "Histoire Contemporaine", "code": "HIST101", "credits": 4, "speciality": "Histoire"},
    {"name": "Microéconomie", "code": "ECON101", "credits": 5, "speciality": "Économie"},
]

NB_TEACHERS = 5
NB_STUDENTS = 15


def _email(first_name: str, last_name: str, index: int, domain: str) -> str:
    local = f"{first_name}.{last_name}{index}".lower()
    # L'adresse doit rester en ASCII pour respecter le format attendu
    for accented, plain in (("é", "e"), ("è", "e"), ("ë", "e"), ("ï", "i"), ("ç", "c")):
        local = local.replace(accented, plain)
    return f"{local}@{domain}"


def _phone(rng: random.Random) -> str:
    return "+33 " + " ".join(f"{rng.randint(0, 99):02d}" for _ in range(5))


def _birth_date(rng: random.Random, today: date) -> date:
    """Étudiant âgé de 18 à 25 ans."""
    return today - timedelta(days=rng.randint(18 * 365, 25 * 365))


def _teacher_for(teachers: list, speciality: str, rng: random.Random):
    """Un enseignant de la spécialité demandée, sinon un enseignant au hasard."""
    matching = [t for t in teachers if t.speciality == speciality]
    return matching[0] if matching else rng.choice(teachers)


def seed(db: Session, clock: Optional[Clock] = None, rng: Optional[random.Random] = None) -> dict:
    """Insère le jeu de démonstration et retourne le nombre d'enregistrements par entité."""
    clock = clock or SystemClock()
    rng = rng or random.Random()
    today = clock.today()

    teachers = []
    specialities = rng.sample(SPECIALITIES, NB_TEACHERS)
    for i, speciality in enumerate(specialities):
        first_name, last_name = rng.choice(FIRST_NAMES), rng.choice(LAST_NAMES)
        teachers.append(teacher_service.create_teacher(db, TeacherCreate(
            first_name=first_name,
            last_name=last_name,
            email=_email(first_name, last_name, i, "ishakschool.fr"),
            phone=_phone(rng),
            speciality=speciality,
        ), clock))

    students = []
    for i in range(NB_STUDENTS):
        first_name, last_name = rng.choice(FIRST_NAMES), rng.choice(LAST_NAMES)
        students.append(student_service.create_student(db, StudentCreate(
            first_name=first_name,
            last_name=last_name,
            email=_email(first_name, last_name, i, "etu.ishakschool.fr"),
            phone=_phone(rng),
            birth_date=_birth_date(rng, today),
            address=f"{rng.randint(1, 200)} {rng.choice(STREETS)}, {rng.choice(CITIES)}",
        ), clock, rng))

    courses = []
    for data in COURSES:
        teacher = _teacher_for(teachers, data["speciality"], rng)
        courses.append(course_service.create_course(db, CourseCreate(
            name=data["name"],
            code=data["code"],
            description=f"Cours de {data['speciality'].lower()} : {data['name']}.",
            credits=data["credits"],
            max_capacity=rng.randint(15, 40),
            semester=rng.choice(SEMESTERS),
            year=today.year,
            teacher_id=teacher.id,
        ), clock))

    enrollments = 0
    for student in students:
        for course in rng.sample(courses, rng.randint(2, 5)):
            status = rng.choice(STATUSES)
            grade = round(rng.uniform(0, 20), 1) if status != "En attente" else None
            enrollment_service.create_enrollment(db, EnrollmentCreate(
                student_id=student.id,
                course_id=course.id,
                status=status,
                grade=grade,
            ), clock)
            enrollments += 1

    counts = {
        "teachers": len(teachers),
        "students": len(students),
        "courses": len(courses),
        "enrollments": enrollments,
    }
    logger.info("Données de démonstration chargées : %s", counts)
    return counts


def main() -> None:
    Base.metadata.create_all(bind=engine)
    with session_scope() as db:
        seed(db)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    main()
