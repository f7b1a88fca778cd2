"""
Router pour les étudiants.
CRUD complet + inscriptions d'un étudiant (GET /api/students/{id}/enrollments).
"""

import random
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.clock import Clock, get_clock, get_rng
from app.database import get_db
from app.schemas.enrollment import EnrollmentResponse
from app.schemas.error import ERROR_RESPONSES
from app.schemas.student import StudentCreate, StudentResponse, StudentUpdate
from app.services import enrollment_service, student_service

router = APIRouter(prefix="/api/students", tags=["Étudiants"], responses=ERROR_RESPONSES)


@router.get("", response_model=List[StudentResponse], summary="Lister les étudiants")
def list_students(db: Session = Depends(get_db), clock: Clock = Depends(get_clock)):
    """Retourne tous les étudiants triés alphabétiquement par nom puis prénom."""
    return student_service.get_students(db, clock)


@router.get("/{student_id}", response_model=StudentResponse, summary="Détail d'un étudiant")
def get_student(student_id: int, db: Session = Depends(get_db), clock: Clock = Depends(get_clock)):
    return student_service.get_student(db, student_id, clock)


@router.post("", response_model=StudentResponse, status_code=201, summary="Créer un étudiant")
def create_student(
    data: StudentCreate,
    db: Session = Depends(get_db),
    clock: Clock = Depends(get_clock),
    rng: random.Random = Depends(get_rng),
):
    """Crée un étudiant ; le numéro étudiant (STUaaaaNNNN) est généré s'il n'est pas fourni."""
    return student_service.create_student(db, data, clock, rng)


@router.put("/{student_id}", response_model=StudentResponse, summary="Modifier un étudiant")
def update_student(
    student_id: int,
    data: StudentUpdate,
    db: Session = Depends(get_db),
    clock: Clock = Depends(get_clock),
):
    """Met à jour les champs fournis d'un étudiant. Les champs absents ne sont pas modifiés."""
    return student_service.update_student(db, student_id, data, clock)


@router.delete("/{student_id}", status_code=204, summary="Supprimer un étudiant")
def delete_student(student_id: int, db: Session = Depends(get_db)):
    """Supprime définitivement un étudiant. Ses inscriptions sont supprimées en cascade."""
    student_service.delete_student(db, student_id)


@router.get(
    "/{student_id}/enrollments",
    response_model=List[EnrollmentResponse],
    summary="Inscriptions d'un étudiant",
)
def list_student_enrollments(student_id: int, db: Session = Depends(get_db)):
    return enrollment_service.find_enrollments_by_student(db, student_id)
