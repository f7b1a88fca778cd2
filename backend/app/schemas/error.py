"""
Schémas des réponses d'erreur (400, 404, 409).
"""

from typing import List

from pydantic import BaseModel


class ViolationDetail(BaseModel):
    field: str
    message: str


class ValidationErrorResponse(BaseModel):
    detail: str
    errors: List[ViolationDetail]


class ErrorResponse(BaseModel):
    detail: str


# Réponses d'erreur documentées dans l'OpenAPI de chaque router
ERROR_RESPONSES = {
    400: {"model": ValidationErrorResponse, "description": "Données invalides"},
    404: {"model": ErrorResponse, "description": "Ressource introuvable"},
}
