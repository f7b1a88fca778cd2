"""
Point d'entrée principal de l'API Ishak'School.
Démarrage : uvicorn app.main:app --reload
"""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic.alias_generators import to_camel

import app.models  # noqa: F401 — enregistre tous les modèles dans Base.metadata avant les routers
from app.config import settings
from app.core.errors import DeleteConflict, NotFound, ValidationFailure
from app.routers import courses, enrollments, students, teachers

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Ishak'School API",
    description="API de gestion scolaire : enseignants, étudiants, cours et inscriptions",
    version="1.0.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
)

# CORS — autorise l'interface d'administration servie en local (à restreindre en production).
app.add_middleware(
    CORSMiddleware,
    allow_origins=[],
    allow_origin_regex=settings.CORS_ORIGIN_REGEX,
    allow_credentials=False,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Accept"],
)


app.include_router(teachers.router)
app.include_router(students.router)
app.include_router(courses.router)
app.include_router(enrollments.router)


@app.exception_handler(ValidationFailure)
async def validation_failure_handler(request: Request, exc: ValidationFailure) -> JSONResponse:
    """Toutes les violations sont renvoyées ensemble, champ par champ (noms JSON en camelCase)."""
    logger.info("Requête rejetée %s %s : %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=400,
        content={
            "detail": "Données invalides",
            "errors": [{"field": to_camel(v.field), "message": v.message} for v in exc.violations],
        },
    )


@app.exception_handler(NotFound)
async def not_found_handler(request: Request, exc: NotFound) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": exc.message})


@app.exception_handler(DeleteConflict)
async def delete_conflict_handler(request: Request, exc: DeleteConflict) -> JSONResponse:
    logger.info("Suppression refusée %s : %s", request.url.path, exc.message)
    return JSONResponse(status_code=409, content={"detail": exc.message})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Intercepte toutes les exceptions non gérées pour garantir que la réponse 500
    passe bien par CORSMiddleware (qui injecte les headers CORS).
    """
    logger.error("Exception non gérée : %s", exc, exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": "Une erreur interne est survenue."},
    )


@app.get("/api/health", tags=["Santé"])
def health_check():
    """Vérifie que l'API est opérationnelle."""
    return {"status": "ok", "service": "Ishak'School API", "version": "1.0.0"}
