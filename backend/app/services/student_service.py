"""
Service métier pour les étudiants.
Le numéro étudiant est généré à la création à partir d'une source d'aléa injectée.
"""

import logging
import random

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from app.core.checkers import check_student
from app.core.clock import Clock
from app.core.defaults import student_defaults
from app.core.derived import age, full_name
from app.core.errors import NotFound, Violation
from app.core.merge import STUDENT_NORMALIZERS, merge_state
from app.core.messages import format_message
from app.models.enrollment import Enrollment
from app.models.student import Student
from app.schemas.student import StudentCreate, StudentResponse, StudentSummary, StudentUpdate
from app.services.entity_support import apply_merge, commit_or_fail, raise_if_invalid, snapshot, value_taken

logger = logging.getLogger(__name__)

STUDENT_FIELDS = (
    "first_name",
    "last_name",
    "email",
    "phone",
    "birth_date",
    "address",
    "student_number",
)
NOT_FOUND_MESSAGE = "Étudiant non trouvé"


def create_student(db: Session, data: StudentCreate, clock: Clock, rng: random.Random) -> StudentResponse:
    """
    Crée un étudiant. Un studentNumber fourni remplace celui généré.
    Lève ValidationFailure si une règle est violée ou si l'email est déjà utilisé.
    """
    candidate = merge_state(
        student_defaults(clock, rng), data.model_dump(exclude_unset=True), STUDENT_NORMALIZERS
    ).state
    violations = check_student(candidate, clock.today()) + _unique_email_violations(db, candidate["email"])
    raise_if_invalid(violations, [])

    now = clock.now()
    student = Student(**candidate, created_at=now, updated_at=now)
    db.add(student)
    commit_or_fail(db, _email_taken(candidate["email"]))
    db.refresh(student)

    logger.info("Étudiant créé : %s (%s)", student.student_number, student.id)
    return _to_response(db, student, clock)


def get_students(db: Session, clock: Clock) -> list[StudentResponse]:
    """Retourne tous les étudiants triés par nom puis prénom."""
    students = db.execute(
        select(Student).order_by(Student.last_name, Student.first_name)
    ).scalars().all()
    return [_to_response(db, s, clock) for s in students]


def get_student(db: Session, student_id: int, clock: Clock) -> StudentResponse:
    return _to_response(db, get_student_or_raise(db, student_id), clock)


def update_student(db: Session, student_id: int, data: StudentUpdate, clock: Clock) -> StudentResponse:
    """Met à jour les champs fournis. Rien n'est écrit si l'état fusionné est invalide."""
    student = get_student_or_raise(db, student_id)

    merge = merge_state(snapshot(student, STUDENT_FIELDS), data.model_dump(exclude_unset=True), STUDENT_NORMALIZERS)
    violations = check_student(merge.state, clock.today())
    if "email" in merge.changed:
        violations += _unique_email_violations(db, merge.state["email"], exclude_id=student.id)
    raise_if_invalid(violations, [])

    apply_merge(student, merge, clock.now())
    commit_or_fail(db, _email_taken(merge.state["email"]))
    db.refresh(student)

    if merge.has_changes:
        logger.info("Étudiant %s modifié : %s", student.id, ", ".join(merge.changed))
    return _to_response(db, student, clock)


def delete_student(db: Session, student_id: int) -> None:
    """Supprime un étudiant et, en cascade, toutes ses inscriptions."""
    student = get_student_or_raise(db, student_id)

    removed = db.execute(
        delete(Enrollment).where(Enrollment.student_id == student.id)
    ).rowcount
    db.delete(student)
    db.commit()
    logger.info("Étudiant supprimé : %s (%d inscription(s) supprimée(s))", student_id, removed or 0)


def get_student_or_raise(db: Session, student_id: int) -> Student:
    student = db.get(Student, student_id)
    if student is None:
        raise NotFound(NOT_FOUND_MESSAGE)
    return student


def to_summary(student: Student) -> StudentSummary:
    return StudentSummary(
        id=student.id,
        first_name=student.first_name,
        last_name=student.last_name,
        full_name=full_name(student.first_name, student.last_name),
        email=student.email,
        student_number=student.student_number,
    )


def _email_taken(email) -> Violation:
    return Violation("email", format_message("email", "unique", value=email))


def _unique_email_violations(db: Session, email, exclude_id=None) -> list[Violation]:
    if value_taken(db, Student, "email", email, exclude_id=exclude_id):
        return [_email_taken(email)]
    return []


def _to_response(db: Session, student: Student, clock: Clock) -> StudentResponse:
    """Construit le schéma de réponse ; l'âge est recalculé à chaque lecture."""
    enrollment_count = db.execute(
        select(func.count())
        .select_from(Enrollment)
        .where(Enrollment.student_id == student.id)
    ).scalar() or 0

    return StudentResponse(
        id=student.id,
        first_name=student.first_name,
        last_name=student.last_name,
        full_name=full_name(student.first_name, student.last_name),
        email=student.email,
        phone=student.phone,
        birth_date=student.birth_date,
        age=age(student.birth_date, clock.today()),
        address=student.address,
        student_number=student.student_number,
        enrollment_count=enrollment_count,
        created_at=student.created_at,
        updated_at=student.updated_at,
    )
