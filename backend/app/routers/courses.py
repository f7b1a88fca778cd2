"""
Router pour les cours.
CRUD complet + inscriptions à un cours (GET /api/courses/{id}/enrollments).
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.clock import Clock, get_clock
from app.database import get_db
from app.schemas.course import CourseCreate, CourseResponse, CourseUpdate
from app.schemas.enrollment import EnrollmentResponse
from app.schemas.error import ERROR_RESPONSES
from app.services import course_service, enrollment_service

router = APIRouter(prefix="/api/courses", tags=["Cours"], responses=ERROR_RESPONSES)


@router.get("", response_model=List[CourseResponse], summary="Lister les cours")
def list_courses(db: Session = Depends(get_db)):
    """Retourne tous les cours avec leur enseignant, leur nombre d'inscrits et leur complétude."""
    return course_service.get_courses(db)


@router.get("/{course_id}", response_model=CourseResponse, summary="Détail d'un cours")
def get_course(course_id: int, db: Session = Depends(get_db)):
    return course_service.get_course(db, course_id)


@router.post("", response_model=CourseResponse, status_code=201, summary="Créer un cours")
def create_course(data: CourseCreate, db: Session = Depends(get_db), clock: Clock = Depends(get_clock)):
    """
    Crée un cours rattaché à un enseignant existant (teacherId).
    Le code est enregistré en majuscules ; l'année courante est utilisée si year est absent.
    """
    return course_service.create_course(db, data, clock)


@router.put("/{course_id}", response_model=CourseResponse, summary="Modifier un cours")
def update_course(
    course_id: int,
    data: CourseUpdate,
    db: Session = Depends(get_db),
    clock: Clock = Depends(get_clock),
):
    """Met à jour les champs fournis d'un cours. Un teacherId fourni doit exister."""
    return course_service.update_course(db, course_id, data, clock)


@router.delete("/{course_id}", status_code=204, summary="Supprimer un cours")
def delete_course(course_id: int, db: Session = Depends(get_db)):
    """Supprime un cours. Les inscriptions liées sont supprimées en cascade."""
    course_service.delete_course(db, course_id)


@router.get(
    "/{course_id}/enrollments",
    response_model=List[EnrollmentResponse],
    summary="Inscriptions à un cours",
)
def list_course_enrollments(course_id: int, db: Session = Depends(get_db)):
    return enrollment_service.find_enrollments_by_course(db, course_id)
