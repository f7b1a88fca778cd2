"""
Tests d'intégration API pour les cours.
"""

from datetime import datetime, timezone
from unittest.mock import patch

from app.core.errors import NotFound, ReferenceNotFound, ValidationFailure, Violation
from app.schemas.course import CourseResponse
from app.schemas.teacher import TeacherSummary

NOW = datetime(2025, 3, 15, 9, 30, tzinfo=timezone.utc)


def make_course_response(**kwargs) -> CourseResponse:
    return CourseResponse(
        id=kwargs.get("id", 1),
        name="Mathématiques Avancées",
        description=None,
        code=kwargs.get("code", "MATH301"),
        credits=6,
        max_capacity=kwargs.get("max_capacity", 30),
        semester="Automne",
        year=2024,
        teacher_id=1,
        teacher=TeacherSummary(id=1, first_name="Prof", last_name="Math", full_name="Prof Math", email="p@x.com"),
        enrollment_count=kwargs.get("enrollment_count", 0),
        is_full=kwargs.get("is_full", False),
        full_display="MATH301 - Mathématiques Avancées (Automne 2024) - Prof Math",
        created_at=NOW,
        updated_at=NOW,
    )


def test_create_course_succes(client):
    with patch("app.routers.courses.course_service.create_course") as mock:
        mock.return_value = make_course_response()

        response = client.post("/api/courses", json={
            "name": "Mathématiques Avancées",
            "code": "math301",
            "credits": 6,
            "maxCapacity": 30,
            "semester": "Automne",
            "year": 2024,
            "teacherId": 1,
        })

    assert response.status_code == 201
    body = response.json()
    assert body["code"] == "MATH301"
    assert body["teacher"]["fullName"] == "Prof Math"
    assert body["isFull"] is False
    assert body["fullDisplay"].startswith("MATH301 - ")
    data = mock.call_args[0][1]
    assert data.teacher_id == 1
    assert data.max_capacity == 30


def test_create_course_credits_non_numeriques(client):
    response = client.post("/api/courses", json={"credits": "beaucoup"})
    assert response.status_code == 422


def test_create_course_enseignant_inconnu(client):
    """teacherId inconnu → 400 avec une erreur sur teacherId."""
    with patch("app.routers.courses.course_service.create_course") as mock:
        mock.side_effect = ReferenceNotFound([Violation("teacher_id", "Enseignant non trouvé")])

        response = client.post("/api/courses", json={"teacherId": 42})

    assert response.status_code == 400
    assert response.json()["errors"] == [{"field": "teacherId", "message": "Enseignant non trouvé"}]


def test_create_course_code_invalide(client):
    with patch("app.routers.courses.course_service.create_course") as mock:
        mock.side_effect = ValidationFailure([Violation("code", "Le code doit être au format : 2-4 lettres majuscules suivies de 3-4 chiffres (ex: MATH101)")])

        response = client.post("/api/courses", json={"code": "invalid-code"})

    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "code"


def test_get_course_complet(client):
    with patch("app.routers.courses.course_service.get_course") as mock:
        mock.return_value = make_course_response(max_capacity=2, enrollment_count=2, is_full=True)

        response = client.get("/api/courses/1")

    assert response.status_code == 200
    assert response.json()["isFull"] is True
    assert response.json()["enrollmentCount"] == 2


def test_update_course_introuvable(client):
    with patch("app.routers.courses.course_service.update_course") as mock:
        mock.side_effect = NotFound("Cours non trouvé")

        response = client.put("/api/courses/9", json={"credits": 4})

    assert response.status_code == 404


def test_delete_course_succes(client):
    with patch("app.routers.courses.course_service.delete_course") as mock:
        mock.return_value = None
        response = client.delete("/api/courses/1")
    assert response.status_code == 204


def test_list_course_enrollments(client):
    with patch("app.routers.courses.enrollment_service.find_enrollments_by_course") as mock:
        mock.return_value = []

        response = client.get("/api/courses/3/enrollments")

    assert response.status_code == 200
    assert response.json() == []
    assert mock.call_args[0][1] == 3
