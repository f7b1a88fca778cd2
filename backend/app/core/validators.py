"""
Validateurs de champs purs.

Chaque champ déclare ses contraintes dans un FieldRules ; validate_field retourne
toutes les règles violées (jamais seulement la première).
"""

import math
import re
from dataclasses import dataclass
from datetime import date, datetime
from numbers import Real
from typing import Any, List, Optional, Pattern, Tuple

from app.core.errors import Violation
from app.core.messages import MESSAGES, MessageCatalog, format_message

EMAIL_REGEX = re.compile(r"^[a-zA-Z0-9._%+\-]+@[a-zA-Z0-9.\-]+\.[a-zA-Z]{2,}$")
PHONE_REGEX = re.compile(r"^[0-9+\-\s()]+$")
COURSE_CODE_REGEX = re.compile(r"^[A-Z]{2,4}[0-9]{3,4}$")
STUDENT_NUMBER_REGEX = re.compile(r"^STU\d{8}$")

SEMESTERS = ("Automne", "Hiver", "Printemps", "Été")

STATUS_ACTIVE = "Actif"
STATUS_COMPLETED = "Terminé"
STATUS_DROPPED = "Abandonné"
STATUS_PENDING = "En attente"
STATUSES = (STATUS_ACTIVE, STATUS_COMPLETED, STATUS_DROPPED, STATUS_PENDING)


@dataclass(frozen=True)
class FieldRules:
    """
    Contraintes déclarées d'un champ.

    kind : "str", "int", "number" ou "date".
    positive : entier strictement positif (message "positive").
    minimum / maximum : bornes inclusives ; si les deux sont fixées et que le
    catalogue a une règle "range" pour le champ, un seul message est produit.
    before_today : la date doit être strictement antérieure à aujourd'hui.
    """
    required: bool = False
    kind: str = "str"
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    pattern: Optional[Pattern] = None
    choices: Optional[Tuple[str, ...]] = None
    positive: bool = False
    minimum: Optional[float] = None
    maximum: Optional[float] = None
    before_today: bool = False


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _has_kind(value: Any, kind: str) -> bool:
    if kind == "str":
        return isinstance(value, str)
    if kind == "int":
        return isinstance(value, int) and not isinstance(value, bool)
    if kind == "number":
        # NaN et les infinis échappent aux comparaisons de bornes
        return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value)
    if kind == "date":
        return isinstance(value, date)
    raise ValueError(f"Type de champ inconnu : {kind}")


def validate_field(
    field: str,
    value: Any,
    rules: FieldRules,
    today: Optional[date] = None,
    catalog: MessageCatalog = MESSAGES,
) -> List[Violation]:
    """
    Vérifie une valeur candidate contre les contraintes de son champ.
    Retourne la liste des violations (vide si la valeur est valide).
    """
    def violation(rule: str, **params) -> Violation:
        return Violation(field, format_message(field, rule, catalog, **params))

    if _is_blank(value):
        if rules.required:
            found = [violation("required")]
            # Une chaîne vide viole aussi la longueur minimale
            if value is not None and rules.min_length:
                found.append(violation("min_length", limit=rules.min_length))
            return found
        return []

    if rules.choices is not None:
        if value not in rules.choices:
            return [violation("choice", choices=", ".join(rules.choices))]
        return []

    if not _has_kind(value, rules.kind):
        return [violation("type")]

    found: List[Violation] = []

    if rules.kind == "str":
        if rules.min_length is not None and len(value) < rules.min_length:
            found.append(violation("min_length", limit=rules.min_length))
        if rules.max_length is not None and len(value) > rules.max_length:
            found.append(violation("max_length", limit=rules.max_length))
        if rules.pattern is not None and not rules.pattern.match(value):
            found.append(violation("format", value=value))

    elif rules.kind in ("int", "number"):
        if rules.positive and value <= 0:
            found.append(violation("positive"))
        low_fails = rules.minimum is not None and value < rules.minimum
        high_fails = rules.maximum is not None and value > rules.maximum
        has_range = "range" in catalog.get(field, {})
        if has_range and rules.minimum is not None and rules.maximum is not None:
            if low_fails or high_fails:
                found.append(violation("range", min=_plain(rules.minimum), max=_plain(rules.maximum)))
        else:
            if low_fails:
                found.append(violation("min", limit=_plain(rules.minimum)))
            if high_fails:
                found.append(violation("max", limit=_plain(rules.maximum)))

    elif rules.kind == "date":
        if rules.before_today:
            if today is None:
                raise ValueError(f"La date du jour est nécessaire pour valider {field}")
            as_date = value.date() if isinstance(value, datetime) else value
            if as_date >= today:
                found.append(violation("past"))

    return found


def _plain(bound: float):
    """Affiche 10 plutôt que 10.0 dans les messages."""
    return int(bound) if float(bound).is_integer() else bound
