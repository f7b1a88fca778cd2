"""
Service métier pour les inscriptions (étudiant ↔ cours).

Une seule inscription par couple (étudiant, cours). Les références studentId et courseId
sont recherchées dès que la clé est fournie ; un identifiant inconnu est une violation.
"""

import logging
from typing import Any, Mapping, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from app.core import derived
from app.core.checkers import check_enrollment
from app.core.clock import Clock
from app.core.defaults import enrollment_defaults
from app.core.errors import NotFound, Violation
from app.core.merge import ENROLLMENT_NORMALIZERS, merge_state
from app.core.messages import format_message
from app.models.course import Course
from app.models.enrollment import Enrollment
from app.models.student import Student
from app.schemas.enrollment import EnrollmentCreate, EnrollmentResponse, EnrollmentUpdate
from app.services import course_service, student_service
from app.services.entity_support import apply_merge, commit_or_fail, raise_if_invalid, resolve_references, snapshot

logger = logging.getLogger(__name__)

ENROLLMENT_FIELDS = (
    "student_id",
    "course_id",
    "enrollment_date",
    "status",
    "grade",
    "notes",
)
REFERENCES = {"student_id": Student, "course_id": Course}
NOT_FOUND_MESSAGE = "Inscription non trouvée"


def create_enrollment(db: Session, data: EnrollmentCreate, clock: Clock) -> EnrollmentResponse:
    """
    Inscrit un étudiant à un cours.
    Le statut vaut « Actif » et la date d'inscription l'instant courant par défaut.
    """
    changes = data.model_dump(exclude_unset=True)
    candidate = merge_state(enrollment_defaults(clock), changes, ENROLLMENT_NORMALIZERS).state
    violations = check_enrollment(candidate) + _duplicate_violations(db, candidate)
    raise_if_invalid(violations, resolve_references(db, changes, REFERENCES))

    now = clock.now()
    enrollment = Enrollment(**candidate, created_at=now, updated_at=now)
    db.add(enrollment)
    commit_or_fail(db, _duplicate())
    db.refresh(enrollment)

    logger.info(
        "Inscription créée : étudiant %s → cours %s (%s)",
        enrollment.student_id, enrollment.course_id, enrollment.id,
    )
    return _to_response(db, enrollment)


def get_enrollments(db: Session) -> list[EnrollmentResponse]:
    """Retourne toutes les inscriptions, de la plus récente à la plus ancienne."""
    enrollments = db.execute(
        select(Enrollment).order_by(Enrollment.enrollment_date.desc(), Enrollment.id.desc())
    ).scalars().all()
    return [_to_response(db, e) for e in enrollments]


def get_enrollment(db: Session, enrollment_id: int) -> EnrollmentResponse:
    return _to_response(db, _get_or_raise(db, enrollment_id))


def find_enrollments_by_student(db: Session, student_id: int) -> list[EnrollmentResponse]:
    """Inscriptions d'un étudiant. NotFound si l'étudiant n'existe pas."""
    student_service.get_student_or_raise(db, student_id)
    enrollments = db.execute(
        select(Enrollment)
        .where(Enrollment.student_id == student_id)
        .order_by(Enrollment.enrollment_date.desc(), Enrollment.id.desc())
    ).scalars().all()
    return [_to_response(db, e) for e in enrollments]


def find_enrollments_by_course(db: Session, course_id: int) -> list[EnrollmentResponse]:
    """Inscriptions à un cours. NotFound si le cours n'existe pas."""
    course_service.get_course_or_raise(db, course_id)
    enrollments = db.execute(
        select(Enrollment)
        .where(Enrollment.course_id == course_id)
        .order_by(Enrollment.enrollment_date.desc(), Enrollment.id.desc())
    ).scalars().all()
    return [_to_response(db, e) for e in enrollments]


def update_enrollment(db: Session, enrollment_id: int, data: EnrollmentUpdate, clock: Clock) -> EnrollmentResponse:
    """
    Met à jour les champs fournis (statut, note, notes, date, réaffectation étudiant/cours).
    Rien n'est écrit si l'état fusionné est invalide.
    """
    enrollment = _get_or_raise(db, enrollment_id)

    changes = data.model_dump(exclude_unset=True)
    merge = merge_state(snapshot(enrollment, ENROLLMENT_FIELDS), changes, ENROLLMENT_NORMALIZERS)
    violations = check_enrollment(merge.state)
    if {"student_id", "course_id"} & set(merge.changed):
        violations += _duplicate_violations(db, merge.state, exclude_id=enrollment.id)
    raise_if_invalid(violations, resolve_references(db, changes, REFERENCES))

    apply_merge(enrollment, merge, clock.now())
    commit_or_fail(db, _duplicate())
    db.refresh(enrollment)

    if merge.has_changes:
        logger.info("Inscription %s modifiée : %s", enrollment.id, ", ".join(merge.changed))
    return _to_response(db, enrollment)


def delete_enrollment(db: Session, enrollment_id: int) -> None:
    enrollment = _get_or_raise(db, enrollment_id)
    db.delete(enrollment)
    db.commit()
    logger.info("Inscription supprimée : %s", enrollment_id)


def _get_or_raise(db: Session, enrollment_id: int) -> Enrollment:
    enrollment = db.get(Enrollment, enrollment_id)
    if enrollment is None:
        raise NotFound(NOT_FOUND_MESSAGE)
    return enrollment


def _duplicate() -> Violation:
    return Violation("course_id", format_message("course_id", "unique"))


def _duplicate_violations(
    db: Session, state: Mapping[str, Any], exclude_id: Optional[int] = None
) -> list[Violation]:
    """Contrôle l'unicité du couple (étudiant, cours) avant écriture."""
    if state.get("student_id") is None or state.get("course_id") is None:
        return []
    query = (
        select(func.count())
        .select_from(Enrollment)
        .where(
            Enrollment.student_id == state["student_id"],
            Enrollment.course_id == state["course_id"],
        )
    )
    if exclude_id is not None:
        query = query.where(Enrollment.id != exclude_id)
    if (db.execute(query).scalar() or 0) > 0:
        return [_duplicate()]
    return []


def _to_response(db: Session, enrollment: Enrollment) -> EnrollmentResponse:
    """Construit le schéma de réponse avec l'étudiant, le cours et les champs dérivés de la note."""
    student = db.get(Student, enrollment.student_id)
    course = db.get(Course, enrollment.course_id)
    student_name = derived.full_name(student.first_name, student.last_name) if student else None

    return EnrollmentResponse(
        id=enrollment.id,
        student_id=enrollment.student_id,
        course_id=enrollment.course_id,
        student=student_service.to_summary(student) if student else None,
        course=course_service.to_summary(course) if course else None,
        enrollment_date=enrollment.enrollment_date,
        status=enrollment.status,
        grade=enrollment.grade,
        notes=enrollment.notes,
        mention=derived.mention(enrollment.grade),
        is_passed=derived.is_passed(enrollment.grade),
        is_active=derived.is_active(enrollment.status),
        is_completed=derived.is_completed(enrollment.status),
        is_dropped=derived.is_dropped(enrollment.status),
        is_pending=derived.is_pending(enrollment.status),
        full_display=derived.enrollment_full_display(
            student_name,
            course.name if course else None,
            course.code if course else None,
            enrollment.status,
            enrollment.grade,
        ),
        created_at=enrollment.created_at,
        updated_at=enrollment.updated_at,
    )
