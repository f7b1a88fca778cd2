"""
Router pour les enseignants.
CRUD complet + liste des cours d'un enseignant (GET /api/teachers/{id}/courses).
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.clock import Clock, get_clock
from app.database import get_db
from app.schemas.course import CourseResponse
from app.schemas.error import ERROR_RESPONSES
from app.schemas.teacher import TeacherCreate, TeacherResponse, TeacherUpdate
from app.services import course_service, teacher_service

router = APIRouter(prefix="/api/teachers", tags=["Enseignants"], responses=ERROR_RESPONSES)


@router.get("", response_model=List[TeacherResponse], summary="Lister les enseignants")
def list_teachers(db: Session = Depends(get_db)):
    """Retourne tous les enseignants triés par nom puis prénom, avec leur nombre de cours."""
    return teacher_service.get_teachers(db)


@router.get("/{teacher_id}", response_model=TeacherResponse, summary="Détail d'un enseignant")
def get_teacher(teacher_id: int, db: Session = Depends(get_db)):
    return teacher_service.get_teacher(db, teacher_id)


@router.post("", response_model=TeacherResponse, status_code=201, summary="Créer un enseignant")
def create_teacher(data: TeacherCreate, db: Session = Depends(get_db), clock: Clock = Depends(get_clock)):
    """Crée un enseignant. Toutes les violations sont retournées ensemble (400)."""
    return teacher_service.create_teacher(db, data, clock)


@router.put("/{teacher_id}", response_model=TeacherResponse, summary="Modifier un enseignant")
def update_teacher(
    teacher_id: int,
    data: TeacherUpdate,
    db: Session = Depends(get_db),
    clock: Clock = Depends(get_clock),
):
    """Met à jour les champs fournis d'un enseignant. Les champs absents ne sont pas modifiés."""
    return teacher_service.update_teacher(db, teacher_id, data, clock)


@router.delete("/{teacher_id}", status_code=204, summary="Supprimer un enseignant")
def delete_teacher(teacher_id: int, db: Session = Depends(get_db)):
    """Supprime un enseignant. Refusé (409) s'il a encore des cours assignés."""
    teacher_service.delete_teacher(db, teacher_id)


@router.get("/{teacher_id}/courses", response_model=List[CourseResponse], summary="Cours d'un enseignant")
def list_teacher_courses(teacher_id: int, db: Session = Depends(get_db)):
    return course_service.get_teacher_courses(db, teacher_id)
