"""
Service métier pour les cours.
Le code est normalisé en majuscules avant contrôle et stockage ; l'enseignant est
référencé par teacher_id et recherché dès que la clé est fournie.
"""

import logging

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from app.core.checkers import check_course
from app.core.clock import Clock
from app.core.defaults import course_defaults
from app.core.derived import course_full_display, full_name, is_full
from app.core.errors import NotFound, Violation
from app.core.merge import COURSE_NORMALIZERS, merge_state
from app.core.messages import format_message
from app.models.course import Course
from app.models.enrollment import Enrollment
from app.models.teacher import Teacher
from app.schemas.course import CourseCreate, CourseResponse, CourseSummary, CourseUpdate
from app.services import teacher_service
from app.services.entity_support import (
    apply_merge,
    commit_or_fail,
    raise_if_invalid,
    resolve_references,
    snapshot,
    value_taken,
)

logger = logging.getLogger(__name__)

COURSE_FIELDS = (
    "name",
    "description",
    "code",
    "credits",
    "max_capacity",
    "semester",
    "year",
    "teacher_id",
)
REFERENCES = {"teacher_id": Teacher}
NOT_FOUND_MESSAGE = "Cours non trouvé"


def create_course(db: Session, data: CourseCreate, clock: Clock) -> CourseResponse:
    """
    Crée un cours. year vaut l'année courante (horloge injectée) s'il est absent.
    Lève ReferenceNotFound si teacherId est inconnu, ValidationFailure pour les autres règles.
    """
    changes = data.model_dump(exclude_unset=True)
    candidate = merge_state(course_defaults(clock), changes, COURSE_NORMALIZERS).state
    violations = check_course(candidate) + _unique_code_violations(db, candidate["code"])
    raise_if_invalid(violations, resolve_references(db, changes, REFERENCES))

    now = clock.now()
    course = Course(**candidate, created_at=now, updated_at=now)
    db.add(course)
    commit_or_fail(db, _code_taken(candidate["code"]))
    db.refresh(course)

    logger.info("Cours créé : %s (%s)", course.code, course.id)
    return _to_response(db, course)


def get_courses(db: Session) -> list[CourseResponse]:
    """Retourne tous les cours triés par code."""
    courses = db.execute(select(Course).order_by(Course.code)).scalars().all()
    return [_to_response(db, c) for c in courses]


def get_course(db: Session, course_id: int) -> CourseResponse:
    return _to_response(db, get_course_or_raise(db, course_id))


def get_teacher_courses(db: Session, teacher_id: int) -> list[CourseResponse]:
    """Cours assignés à un enseignant. NotFound si l'enseignant n'existe pas."""
    if db.get(Teacher, teacher_id) is None:
        raise NotFound(teacher_service.NOT_FOUND_MESSAGE)
    courses = db.execute(
        select(Course).where(Course.teacher_id == teacher_id).order_by(Course.code)
    ).scalars().all()
    return [_to_response(db, c) for c in courses]


def update_course(db: Session, course_id: int, data: CourseUpdate, clock: Clock) -> CourseResponse:
    """Met à jour les champs fournis. Rien n'est écrit si l'état fusionné est invalide."""
    course = get_course_or_raise(db, course_id)

    changes = data.model_dump(exclude_unset=True)
    merge = merge_state(snapshot(course, COURSE_FIELDS), changes, COURSE_NORMALIZERS)
    violations = check_course(merge.state)
    if "code" in merge.changed:
        violations += _unique_code_violations(db, merge.state["code"], exclude_id=course.id)
    raise_if_invalid(violations, resolve_references(db, changes, REFERENCES))

    apply_merge(course, merge, clock.now())
    commit_or_fail(db, _code_taken(merge.state["code"]))
    db.refresh(course)

    if merge.has_changes:
        logger.info("Cours %s modifié : %s", course.code, ", ".join(merge.changed))
    return _to_response(db, course)


def delete_course(db: Session, course_id: int) -> None:
    """Supprime un cours et, en cascade, toutes ses inscriptions."""
    course = get_course_or_raise(db, course_id)

    removed = db.execute(
        delete(Enrollment).where(Enrollment.course_id == course.id)
    ).rowcount
    db.delete(course)
    db.commit()
    logger.info("Cours supprimé : %s (%d inscription(s) supprimée(s))", course_id, removed or 0)


def get_course_or_raise(db: Session, course_id: int) -> Course:
    course = db.get(Course, course_id)
    if course is None:
        raise NotFound(NOT_FOUND_MESSAGE)
    return course


def count_enrollments(db: Session, course_id: int) -> int:
    return db.execute(
        select(func.count())
        .select_from(Enrollment)
        .where(Enrollment.course_id == course_id)
    ).scalar() or 0


def to_summary(course: Course) -> CourseSummary:
    return CourseSummary(
        id=course.id,
        name=course.name,
        code=course.code,
        credits=course.credits,
        semester=course.semester,
        year=course.year,
    )


def _code_taken(code) -> Violation:
    return Violation("code", format_message("code", "unique", value=code))


def _unique_code_violations(db: Session, code, exclude_id=None) -> list[Violation]:
    if value_taken(db, Course, "code", code, exclude_id=exclude_id):
        return [_code_taken(code)]
    return []


def _to_response(db: Session, course: Course) -> CourseResponse:
    """Construit le schéma de réponse : enseignant, nombre d'inscrits, complétude, affichage."""
    teacher = db.get(Teacher, course.teacher_id) if course.teacher_id is not None else None
    teacher_name = full_name(teacher.first_name, teacher.last_name) if teacher else None
    enrollment_count = count_enrollments(db, course.id)

    return CourseResponse(
        id=course.id,
        name=course.name,
        description=course.description,
        code=course.code,
        credits=course.credits,
        max_capacity=course.max_capacity,
        semester=course.semester,
        year=course.year,
        teacher_id=course.teacher_id,
        teacher=teacher_service.to_summary(teacher) if teacher else None,
        enrollment_count=enrollment_count,
        is_full=is_full(course.max_capacity, enrollment_count),
        full_display=course_full_display(course.code, course.name, course.semester, course.year, teacher_name),
        created_at=course.created_at,
        updated_at=course.updated_at,
    )
