"""
Catalogue des messages de validation : champ → règle → gabarit.

Les gabarits utilisent str.format ({limit}, {value}, {choices}, {min}, {max}).
Un autre catalogue de même forme peut être passé aux validateurs (traduction).
"""

from typing import Dict, Mapping

MessageCatalog = Mapping[str, Mapping[str, str]]

MESSAGES: Dict[str, Dict[str, str]] = {
    "first_name": {
        "required": "Le prénom est obligatoire",
        "type": "Le prénom doit être une chaîne de caractères",
        "min_length": "Le prénom doit contenir au moins {limit} caractères",
        "max_length": "Le prénom ne peut pas dépasser {limit} caractères",
    },
    "last_name": {
        "required": "Le nom est obligatoire",
        "type": "Le nom doit être une chaîne de caractères",
        "min_length": "Le nom doit contenir au moins {limit} caractères",
        "max_length": "Le nom ne peut pas dépasser {limit} caractères",
    },
    "email": {
        "required": "L'email est obligatoire",
        "type": "L'email doit être une chaîne de caractères",
        "max_length": "L'email ne peut pas dépasser {limit} caractères",
        "format": "L'email \"{value}\" n'est pas valide",
        "unique": "L'email \"{value}\" est déjà utilisé",
    },
    "phone": {
        "type": "Le téléphone doit être une chaîne de caractères",
        "max_length": "Le téléphone ne peut pas dépasser {limit} caractères",
        "format": "Le téléphone ne doit contenir que des chiffres, espaces, +, - et parenthèses",
    },
    "speciality": {
        "required": "La spécialité est obligatoire",
        "type": "La spécialité doit être une chaîne de caractères",
    },
    "birth_date": {
        "type": "La date de naissance n'est pas une date valide",
        "past": "La date de naissance doit être antérieure à aujourd'hui",
    },
    "address": {
        "type": "L'adresse doit être une chaîne de caractères",
    },
    "student_number": {
        "type": "Le numéro étudiant doit être une chaîne de caractères",
        "format": "Le numéro étudiant doit être au format STU suivi de 8 chiffres",
    },
    "name": {
        "required": "Le nom du cours est obligatoire",
        "type": "Le nom du cours doit être une chaîne de caractères",
        "min_length": "Le nom du cours doit contenir au moins {limit} caractères",
        "max_length": "Le nom du cours ne peut pas dépasser {limit} caractères",
    },
    "description": {
        "type": "La description doit être une chaîne de caractères",
    },
    "code": {
        "required": "Le code du cours est obligatoire",
        "type": "Le code du cours doit être une chaîne de caractères",
        "format": "Le code doit être au format : 2-4 lettres majuscules suivies de 3-4 chiffres (ex: MATH101)",
        "unique": "Le code \"{value}\" est déjà utilisé par un autre cours",
    },
    "credits": {
        "required": "Le nombre de crédits est obligatoire",
        "type": "Le nombre de crédits doit être un entier",
        "positive": "Le nombre de crédits doit être positif",
        "max": "Le nombre de crédits ne peut pas dépasser {limit}",
    },
    "max_capacity": {
        "type": "La capacité maximale doit être un entier",
        "positive": "La capacité maximale doit être positive",
    },
    "semester": {
        "required": "Le semestre est obligatoire",
        "choice": "Le semestre doit être l'un des suivants : {choices}",
    },
    "year": {
        "required": "L'année est obligatoire",
        "type": "L'année doit être un entier",
        "range": "L'année doit être entre {min} et {max}",
    },
    "teacher_id": {
        "required": "Un enseignant doit être assigné au cours",
        "not_found": "Enseignant non trouvé",
    },
    "student_id": {
        "required": "Un étudiant doit être assigné à l'inscription",
        "not_found": "Étudiant non trouvé",
    },
    "course_id": {
        "required": "Un cours doit être assigné à l'inscription",
        "not_found": "Cours non trouvé",
        "unique": "Cet étudiant est déjà inscrit à ce cours",
    },
    "enrollment_date": {
        "required": "La date d'inscription est obligatoire",
        "type": "La date d'inscription n'est pas une date valide",
    },
    "status": {
        "required": "Le statut est obligatoire",
        "choice": "Le statut doit être l'un des suivants : {choices}",
    },
    "grade": {
        "type": "La note doit être un nombre fini",
        "min": "La note doit être au minimum {limit}",
        "max": "La note doit être au maximum {limit}",
    },
    "notes": {
        "type": "Les notes doivent être une chaîne de caractères",
    },
}


def format_message(field: str, rule: str, catalog: MessageCatalog = MESSAGES, **params) -> str:
    """Construit le message d'une règle. Retombe sur un message générique si absent du catalogue."""
    template = catalog.get(field, {}).get(rule)
    if template is None:
        return f"Valeur invalide pour le champ {field} ({rule})"
    return template.format(**params)
