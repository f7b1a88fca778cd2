"""
Router pour les inscriptions.
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.clock import Clock, get_clock
from app.database import get_db
from app.schemas.enrollment import EnrollmentCreate, EnrollmentResponse, EnrollmentUpdate
from app.schemas.error import ERROR_RESPONSES
from app.services import enrollment_service

router = APIRouter(prefix="/api/enrollments", tags=["Inscriptions"], responses=ERROR_RESPONSES)


@router.get("", response_model=List[EnrollmentResponse], summary="Lister les inscriptions")
def list_enrollments(db: Session = Depends(get_db)):
    """Retourne toutes les inscriptions avec mention et statut de validation."""
    return enrollment_service.get_enrollments(db)


@router.get("/{enrollment_id}", response_model=EnrollmentResponse, summary="Détail d'une inscription")
def get_enrollment(enrollment_id: int, db: Session = Depends(get_db)):
    return enrollment_service.get_enrollment(db, enrollment_id)


@router.post("", response_model=EnrollmentResponse, status_code=201, summary="Inscrire un étudiant à un cours")
def create_enrollment(data: EnrollmentCreate, db: Session = Depends(get_db), clock: Clock = Depends(get_clock)):
    """
    Crée une inscription. Un étudiant ne peut être inscrit qu'une fois au même cours.
    Statut par défaut : « Actif ».
    """
    return enrollment_service.create_enrollment(db, data, clock)


@router.put("/{enrollment_id}", response_model=EnrollmentResponse, summary="Modifier une inscription")
def update_enrollment(
    enrollment_id: int,
    data: EnrollmentUpdate,
    db: Session = Depends(get_db),
    clock: Clock = Depends(get_clock),
):
    """Met à jour les champs fournis (statut, note, notes, réaffectation)."""
    return enrollment_service.update_enrollment(db, enrollment_id, data, clock)


@router.delete("/{enrollment_id}", status_code=204, summary="Supprimer une inscription")
def delete_enrollment(enrollment_id: int, db: Session = Depends(get_db)):
    enrollment_service.delete_enrollment(db, enrollment_id)
