"""
Service métier pour les enseignants.
"""

import logging

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from app.core.checkers import check_teacher
from app.core.clock import Clock
from app.core.defaults import teacher_defaults
from app.core.derived import full_name
from app.core.errors import DeleteConflict, NotFound, Violation
from app.core.merge import TEACHER_NORMALIZERS, merge_state
from app.core.messages import format_message
from app.models.course import Course
from app.models.teacher import Teacher
from app.schemas.teacher import TeacherCreate, TeacherResponse, TeacherSummary, TeacherUpdate
from app.services.entity_support import apply_merge, commit_or_fail, raise_if_invalid, snapshot, value_taken

logger = logging.getLogger(__name__)

TEACHER_FIELDS = tuple(teacher_defaults())
NOT_FOUND_MESSAGE = "Enseignant non trouvé"


def create_teacher(db: Session, data: TeacherCreate, clock: Clock) -> TeacherResponse:
    """
    Crée un enseignant.
    Lève ValidationFailure si une règle est violée ou si l'email est déjà utilisé.
    """
    candidate = merge_state(teacher_defaults(), data.model_dump(exclude_unset=True), TEACHER_NORMALIZERS).state
    violations = check_teacher(candidate) + _unique_email_violations(db, candidate["email"])
    raise_if_invalid(violations, [])

    now = clock.now()
    teacher = Teacher(**candidate, created_at=now, updated_at=now)
    db.add(teacher)
    commit_or_fail(db, _email_taken(candidate["email"]))
    db.refresh(teacher)

    logger.info("Enseignant créé : %s %s (%s)", teacher.first_name, teacher.last_name, teacher.id)
    return _to_response(db, teacher)


def get_teachers(db: Session) -> list[TeacherResponse]:
    """Retourne tous les enseignants triés par nom puis prénom."""
    teachers = db.execute(
        select(Teacher).order_by(Teacher.last_name, Teacher.first_name)
    ).scalars().all()
    return [_to_response(db, t) for t in teachers]


def get_teacher(db: Session, teacher_id: int) -> TeacherResponse:
    return _to_response(db, _get_or_raise(db, teacher_id))


def update_teacher(db: Session, teacher_id: int, data: TeacherUpdate, clock: Clock) -> TeacherResponse:
    """Met à jour les champs fournis. Rien n'est écrit si l'état fusionné est invalide."""
    teacher = _get_or_raise(db, teacher_id)

    changes = data.model_dump(exclude_unset=True)
    merge = merge_state(snapshot(teacher, TEACHER_FIELDS), changes, TEACHER_NORMALIZERS)
    violations = check_teacher(merge.state)
    if "email" in merge.changed:
        violations += _unique_email_violations(db, merge.state["email"], exclude_id=teacher.id)
    raise_if_invalid(violations, [])

    apply_merge(teacher, merge, clock.now())
    commit_or_fail(db, _email_taken(merge.state["email"]))
    db.refresh(teacher)

    if merge.has_changes:
        logger.info("Enseignant %s modifié : %s", teacher.id, ", ".join(merge.changed))
    return _to_response(db, teacher)


def delete_teacher(db: Session, teacher_id: int) -> None:
    """
    Supprime un enseignant.
    Refusé (DeleteConflict) tant que des cours lui sont assignés.
    """
    teacher = _get_or_raise(db, teacher_id)

    if _count_courses(db, teacher.id) > 0:
        raise DeleteConflict("Impossible de supprimer cet enseignant car il a des cours assignés")

    db.delete(teacher)
    db.commit()
    logger.info("Enseignant supprimé : %s", teacher_id)


def to_summary(teacher: Teacher) -> TeacherSummary:
    return TeacherSummary(
        id=teacher.id,
        first_name=teacher.first_name,
        last_name=teacher.last_name,
        full_name=full_name(teacher.first_name, teacher.last_name),
        email=teacher.email,
    )


def _get_or_raise(db: Session, teacher_id: int) -> Teacher:
    teacher = db.get(Teacher, teacher_id)
    if teacher is None:
        raise NotFound(NOT_FOUND_MESSAGE)
    return teacher


def _email_taken(email) -> Violation:
    return Violation("email", format_message("email", "unique", value=email))


def _unique_email_violations(db: Session, email, exclude_id=None) -> list[Violation]:
    if value_taken(db, Teacher, "email", email, exclude_id=exclude_id):
        return [_email_taken(email)]
    return []


def _count_courses(db: Session, teacher_id: int) -> int:
    return db.execute(
        select(func.count())
        .select_from(Course)
        .where(Course.teacher_id == teacher_id)
    ).scalar() or 0


def _to_response(db: Session, teacher: Teacher) -> TeacherResponse:
    """Construit le schéma de réponse avec le nom complet et le nombre de cours."""
    return TeacherResponse(
        id=teacher.id,
        first_name=teacher.first_name,
        last_name=teacher.last_name,
        full_name=full_name(teacher.first_name, teacher.last_name),
        email=teacher.email,
        phone=teacher.phone,
        speciality=teacher.speciality,
        course_count=_count_courses(db, teacher.id),
        created_at=teacher.created_at,
        updated_at=teacher.updated_at,
    )
