"""
Politique de fusion des mises à jour partielles.

Seules les clés présentes dans `changes` remplacent la valeur existante (un None explicite
est une clé présente) ; les clés absentes conservent leur valeur. La fusion produit un
nouvel état sans toucher à l'entité : l'appelant vérifie cet état avant de l'écrire.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

Normalizer = Callable[[Any], Any]


@dataclass(frozen=True)
class MergeResult:
    state: Dict[str, Any]
    changed: Tuple[str, ...]

    @property
    def has_changes(self) -> bool:
        return bool(self.changed)


def normalize_code(value: Any) -> Any:
    return value.strip().upper() if isinstance(value, str) else value


def normalize_email(value: Any) -> Any:
    return value.strip() if isinstance(value, str) else value


TEACHER_NORMALIZERS: Dict[str, Normalizer] = {"email": normalize_email}
STUDENT_NORMALIZERS: Dict[str, Normalizer] = {"email": normalize_email}
COURSE_NORMALIZERS: Dict[str, Normalizer] = {"code": normalize_code}
ENROLLMENT_NORMALIZERS: Dict[str, Normalizer] = {}


def merge_state(
    existing: Mapping[str, Any],
    changes: Mapping[str, Any],
    normalizers: Optional[Mapping[str, Normalizer]] = None,
) -> MergeResult:
    """Applique `changes` sur une copie de `existing` et liste les champs réellement modifiés."""
    normalizers = normalizers or {}
    state = dict(existing)
    changed = []
    for field, value in changes.items():
        normalizer = normalizers.get(field)
        if normalizer is not None and value is not None:
            value = normalizer(value)
        if field not in state or state[field] != value:
            changed.append(field)
        state[field] = value
    return MergeResult(state=state, changed=tuple(changed))
