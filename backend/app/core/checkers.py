"""
Vérificateurs d'invariants par entité.

Chaque vérificateur reçoit l'état complet d'une entité (dictionnaire champ → valeur,
noms Python) et retourne toutes les violations. L'entité est valide si la liste est vide.
Ils s'appliquent à l'identique au candidat d'une création et à l'état fusionné d'une mise à jour.
"""

from datetime import date
from typing import Any, Dict, List, Mapping, Optional

from app.core.errors import Violation
from app.core.messages import MESSAGES, MessageCatalog, format_message
from app.core.validators import (
    COURSE_CODE_REGEX,
    EMAIL_REGEX,
    PHONE_REGEX,
    SEMESTERS,
    STATUSES,
    STUDENT_NUMBER_REGEX,
    FieldRules,
    validate_field,
)

PERSON_NAME = FieldRules(required=True, min_length=2, max_length=100)
EMAIL = FieldRules(required=True, max_length=255, pattern=EMAIL_REGEX)
PHONE = FieldRules(max_length=20, pattern=PHONE_REGEX)

TEACHER_RULES: Dict[str, FieldRules] = {
    "first_name": PERSON_NAME,
    "last_name": PERSON_NAME,
    "email": EMAIL,
    "phone": PHONE,
    "speciality": FieldRules(required=True),
}

STUDENT_RULES: Dict[str, FieldRules] = {
    "first_name": PERSON_NAME,
    "last_name": PERSON_NAME,
    "email": EMAIL,
    "phone": PHONE,
    "birth_date": FieldRules(kind="date", before_today=True),
    "address": FieldRules(),
    "student_number": FieldRules(pattern=STUDENT_NUMBER_REGEX),
}

COURSE_RULES: Dict[str, FieldRules] = {
    "name": FieldRules(required=True, min_length=3, max_length=200),
    "description": FieldRules(),
    "code": FieldRules(required=True, pattern=COURSE_CODE_REGEX),
    "credits": FieldRules(required=True, kind="int", positive=True, maximum=10),
    "max_capacity": FieldRules(kind="int", positive=True),
    "semester": FieldRules(required=True, choices=SEMESTERS),
    "year": FieldRules(required=True, kind="int", minimum=2020, maximum=2030),
}

ENROLLMENT_RULES: Dict[str, FieldRules] = {
    "enrollment_date": FieldRules(required=True, kind="date"),
    "status": FieldRules(required=True, choices=STATUSES),
    "grade": FieldRules(kind="number", minimum=0, maximum=20),
    "notes": FieldRules(),
}


def check_fields(
    state: Mapping[str, Any],
    rules: Mapping[str, FieldRules],
    today: Optional[date] = None,
    catalog: MessageCatalog = MESSAGES,
) -> List[Violation]:
    """Applique chaque règle déclarée à la valeur correspondante de l'état."""
    violations: List[Violation] = []
    for field, field_rules in rules.items():
        violations.extend(validate_field(field, state.get(field), field_rules, today=today, catalog=catalog))
    return violations


def _require_reference(state: Mapping[str, Any], field: str, catalog: MessageCatalog) -> List[Violation]:
    if state.get(field) is None:
        return [Violation(field, format_message(field, "required", catalog))]
    return []


def check_teacher(state: Mapping[str, Any], catalog: MessageCatalog = MESSAGES) -> List[Violation]:
    return check_fields(state, TEACHER_RULES, catalog=catalog)


def check_student(state: Mapping[str, Any], today: date, catalog: MessageCatalog = MESSAGES) -> List[Violation]:
    """La date du jour est explicite : la règle sur birth_date en dépend."""
    return check_fields(state, STUDENT_RULES, today=today, catalog=catalog)


def check_course(state: Mapping[str, Any], catalog: MessageCatalog = MESSAGES) -> List[Violation]:
    candidate = dict(state)
    # Le code est comparé au format après passage en majuscules
    if isinstance(candidate.get("code"), str):
        candidate["code"] = candidate["code"].upper()
    violations = check_fields(candidate, COURSE_RULES, catalog=catalog)
    violations.extend(_require_reference(candidate, "teacher_id", catalog))
    return violations


def check_enrollment(state: Mapping[str, Any], catalog: MessageCatalog = MESSAGES) -> List[Violation]:
    violations = _require_reference(state, "student_id", catalog)
    violations.extend(_require_reference(state, "course_id", catalog))
    violations.extend(check_fields(state, ENROLLMENT_RULES, catalog=catalog))
    return violations
