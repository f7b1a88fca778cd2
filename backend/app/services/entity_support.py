"""
Outils partagés par les services d'entités : instantané de l'état, résolution des
références, levée groupée des violations et écriture de l'état fusionné.
"""

from datetime import datetime
from typing import Any, Dict, Iterable, List, Mapping, Optional, Type

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import ReferenceNotFound, ValidationFailure, Violation
from app.core.merge import MergeResult
from app.core.messages import format_message


def snapshot(entity: Any, fields: Iterable[str]) -> Dict[str, Any]:
    """État courant d'une entité ORM sous forme de dictionnaire."""
    return {field: getattr(entity, field) for field in fields}


def resolve_references(
    db: Session,
    changes: Mapping[str, Any],
    references: Mapping[str, Type],
) -> List[Violation]:
    """
    Vérifie chaque identifiant référencé présent dans `changes`.
    Une clé absente ou à None n'est pas recherchée (le vérificateur signale l'obligation).
    """
    violations = []
    for field, model in references.items():
        ref_id = changes.get(field)
        if ref_id is None:
            continue
        if db.get(model, ref_id) is None:
            violations.append(Violation(field, format_message(field, "not_found")))
    return violations


def value_taken(db: Session, model: Type, column: str, value: Any, exclude_id: Optional[int] = None) -> bool:
    """Indique si une autre ligne porte déjà cette valeur (contrôle d'unicité avant écriture)."""
    if value is None:
        return False
    query = select(func.count()).select_from(model).where(getattr(model, column) == value)
    if exclude_id is not None:
        query = query.where(model.id != exclude_id)
    return (db.execute(query).scalar() or 0) > 0


def raise_if_invalid(violations: List[Violation], reference_violations: List[Violation]) -> None:
    """Lève toutes les violations ensemble ; une référence introuvable prime sur le type d'erreur."""
    if reference_violations:
        raise ReferenceNotFound(reference_violations + violations)
    if violations:
        raise ValidationFailure(violations)


def apply_merge(entity: Any, merge: MergeResult, now: datetime) -> None:
    """Écrit les champs modifiés ; updated_at n'est rafraîchi que si quelque chose a changé."""
    for field in merge.changed:
        setattr(entity, field, merge.state[field])
    if merge.has_changes:
        entity.updated_at = now


def commit_or_fail(db: Session, conflict: Violation) -> None:
    """
    Valide la transaction. Une contrainte d'unicité violée entre le contrôle et l'écriture
    est annulée et rapportée comme une violation.
    """
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ValidationFailure([conflict])
