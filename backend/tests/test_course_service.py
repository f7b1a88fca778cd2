"""
Tests du service des cours (base SQLite en mémoire).
"""

from datetime import datetime, timezone

import pytest

from app.core.clock import FixedClock
from app.core.errors import NotFound, ReferenceNotFound, ValidationFailure
from app.models.course import Course
from app.models.enrollment import Enrollment
from app.schemas.course import CourseCreate, CourseUpdate
from app.services import course_service
from factories import create_course, create_enrollment, create_student, create_teacher

LATER = FixedClock(datetime(2025, 4, 1, 14, 0, tzinfo=timezone.utc))


@pytest.fixture
def teacher(db_session, clock):
    return create_teacher(db_session, clock)


def test_create_course_succes(db_session, clock, teacher):
    course = create_course(db_session, clock, teacher.id)
    assert course.code == "MATH301"
    assert course.teacher.full_name == "Prof Math"
    assert course.enrollment_count == 0
    assert course.is_full is False
    assert course.full_display == "MATH301 - Mathématiques Avancées (Automne 2024) - Prof Math"


def test_create_course_code_en_majuscules(db_session, clock, teacher):
    course = create_course(db_session, clock, teacher.id, code="math101")
    assert course.code == "MATH101"
    assert db_session.get(Course, course.id).code == "MATH101"


def test_create_course_annee_par_defaut(db_session, clock, teacher):
    data = CourseCreate(name="Algèbre", code="MATH201", credits=5, semester="Hiver", teacher_id=teacher.id)
    course = course_service.create_course(db_session, data, clock)
    assert course.year == 2025


def test_create_course_code_invalide(db_session, clock, teacher):
    with pytest.raises(ValidationFailure) as exc:
        create_course(db_session, clock, teacher.id, code="invalid-code")
    assert [v.field for v in exc.value.violations] == ["code"]


def test_create_course_enseignant_inconnu(db_session, clock):
    with pytest.raises(ReferenceNotFound) as exc:
        create_course(db_session, clock, 404, credits=0)
    messages = [v.message for v in exc.value.violations]
    assert "Enseignant non trouvé" in messages
    assert "Le nombre de crédits doit être positif" in messages
    assert db_session.query(Course).count() == 0


def test_create_course_sans_enseignant(db_session, clock):
    data = CourseCreate(name="Algèbre", code="MATH201", credits=5, semester="Hiver")
    with pytest.raises(ValidationFailure) as exc:
        course_service.create_course(db_session, data, clock)
    assert not isinstance(exc.value, ReferenceNotFound)
    assert exc.value.violations[0].field == "teacher_id"


def test_create_course_code_duplique(db_session, clock, teacher):
    create_course(db_session, clock, teacher.id)
    with pytest.raises(ValidationFailure) as exc:
        create_course(db_session, clock, teacher.id, code="math301", name="Autre cours")
    assert exc.value.violations[0].field == "code"


def test_update_course_un_seul_champ(db_session, clock, teacher):
    created = create_course(db_session, clock, teacher.id, max_capacity=30, description="Intro")

    updated = course_service.update_course(db_session, created.id, CourseUpdate(credits=4), LATER)

    assert updated.credits == 4
    for field in ("name", "description", "code", "max_capacity", "semester", "year", "teacher_id", "created_at"):
        assert getattr(updated, field) == getattr(created, field)
    assert updated.updated_at != created.updated_at


def test_update_course_code_normalise(db_session, clock, teacher):
    created = create_course(db_session, clock, teacher.id)
    updated = course_service.update_course(db_session, created.id, CourseUpdate(code="info101"), clock)
    assert updated.code == "INFO101"


def test_update_course_reaffectation_enseignant(db_session, clock, teacher):
    created = create_course(db_session, clock, teacher.id)
    other = create_teacher(db_session, clock, first_name="Marie", last_name="Curie", email="curie@x.com")

    updated = course_service.update_course(db_session, created.id, CourseUpdate(teacher_id=other.id), clock)

    assert updated.teacher_id == other.id
    assert updated.full_display.endswith("- Marie Curie")


def test_update_course_enseignant_inconnu_rien_n_est_ecrit(db_session, clock, teacher):
    created = create_course(db_session, clock, teacher.id)
    with pytest.raises(ReferenceNotFound):
        course_service.update_course(db_session, created.id, CourseUpdate(teacher_id=999, credits=3), clock)
    stored = db_session.get(Course, created.id)
    assert stored.teacher_id == teacher.id
    assert stored.credits == 6


def test_course_complet_selon_capacite(db_session, clock, rng, teacher):
    course = create_course(db_session, clock, teacher.id, max_capacity=2)
    first = create_student(db_session, clock, rng)
    second = create_student(db_session, clock, rng, email="jean.martin@example.com")

    create_enrollment(db_session, clock, first.id, course.id)
    assert course_service.get_course(db_session, course.id).is_full is False

    create_enrollment(db_session, clock, second.id, course.id)
    refreshed = course_service.get_course(db_session, course.id)
    assert refreshed.enrollment_count == 2
    assert refreshed.is_full is True


def test_delete_course_supprime_ses_inscriptions(db_session, clock, rng, teacher):
    course = create_course(db_session, clock, teacher.id)
    student = create_student(db_session, clock, rng)
    create_enrollment(db_session, clock, student.id, course.id)

    course_service.delete_course(db_session, course.id)

    assert db_session.get(Course, course.id) is None
    assert db_session.query(Enrollment).count() == 0


def test_get_teacher_courses(db_session, clock, teacher):
    create_course(db_session, clock, teacher.id, code="MATH301")
    create_course(db_session, clock, teacher.id, code="MATH101", name="Analyse")
    codes = [c.code for c in course_service.get_teacher_courses(db_session, teacher.id)]
    assert codes == ["MATH101", "MATH301"]


def test_get_teacher_courses_enseignant_introuvable(db_session):
    with pytest.raises(NotFound, match="Enseignant non trouvé"):
        course_service.get_teacher_courses(db_session, 12)
