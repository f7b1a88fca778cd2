"""
Tests unitaires des validateurs de champs.
"""

from datetime import date, datetime

from app.core.checkers import COURSE_RULES, ENROLLMENT_RULES, PERSON_NAME, STUDENT_RULES, TEACHER_RULES
from app.core.validators import FieldRules, validate_field

TODAY = date(2025, 3, 15)


def messages(violations):
    return [v.message for v in violations]


# --- Obligation et longueur ---

def test_prenom_absent_obligatoire():
    assert messages(validate_field("first_name", None, PERSON_NAME)) == ["Le prénom est obligatoire"]


def test_prenom_vide_viole_obligation_et_longueur():
    found = messages(validate_field("first_name", "", PERSON_NAME))
    assert "Le prénom est obligatoire" in found
    assert "Le prénom doit contenir au moins 2 caractères" in found


def test_nom_espaces_seulement_rejete():
    assert validate_field("last_name", "   ", PERSON_NAME)


def test_nom_trop_court():
    assert messages(validate_field("last_name", "A", PERSON_NAME)) == [
        "Le nom doit contenir au moins 2 caractères"
    ]


def test_nom_trop_long():
    assert messages(validate_field("last_name", "x" * 101, PERSON_NAME)) == [
        "Le nom ne peut pas dépasser 100 caractères"
    ]


def test_nom_limites_acceptees():
    assert validate_field("last_name", "Li", PERSON_NAME) == []
    assert validate_field("last_name", "x" * 100, PERSON_NAME) == []


def test_nom_du_cours_minimum_trois_caracteres():
    assert validate_field("name", "AB", COURSE_RULES["name"])
    assert validate_field("name", "ABC", COURSE_RULES["name"]) == []


def test_champ_optionnel_absent_valide():
    assert validate_field("phone", None, TEACHER_RULES["phone"]) == []
    assert validate_field("phone", "", TEACHER_RULES["phone"]) == []


# --- Formats ---

def test_email_valide():
    assert validate_field("email", "prof.math@x.com", TEACHER_RULES["email"]) == []


def test_email_invalide_cite_la_valeur():
    found = messages(validate_field("email", "pas-un-email", TEACHER_RULES["email"]))
    assert found == ['L\'email "pas-un-email" n\'est pas valide']


def test_telephone_formats():
    rules = TEACHER_RULES["phone"]
    assert validate_field("phone", "+33 (0)1 23-45-67-89", rules) == []
    assert validate_field("phone", "01 23 ab", rules)


def test_code_cours():
    rules = COURSE_RULES["code"]
    assert validate_field("code", "MATH101", rules) == []
    assert validate_field("code", "CS1234", rules) == []
    assert validate_field("code", "M101", rules)
    assert validate_field("code", "MATHS101", rules)
    assert validate_field("code", "MATH10", rules)
    assert validate_field("code", "invalid-code", rules)


def test_numero_etudiant_format():
    rules = STUDENT_RULES["student_number"]
    assert validate_field("student_number", "STU20250042", rules) == []
    assert validate_field("student_number", "STU2025042", rules)


# --- Entiers et bornes ---

def test_credits_bornes():
    rules = COURSE_RULES["credits"]
    assert validate_field("credits", 1, rules) == []
    assert validate_field("credits", 10, rules) == []
    assert messages(validate_field("credits", 0, rules)) == ["Le nombre de crédits doit être positif"]
    assert messages(validate_field("credits", 11, rules)) == ["Le nombre de crédits ne peut pas dépasser 10"]


def test_credits_type_invalide():
    assert messages(validate_field("credits", "six", COURSE_RULES["credits"])) == [
        "Le nombre de crédits doit être un entier"
    ]


def test_booleen_refuse_comme_entier():
    assert validate_field("credits", True, COURSE_RULES["credits"])


def test_capacite_optionnelle_positive():
    rules = COURSE_RULES["max_capacity"]
    assert validate_field("max_capacity", None, rules) == []
    assert validate_field("max_capacity", 30, rules) == []
    assert messages(validate_field("max_capacity", 0, rules)) == ["La capacité maximale doit être positive"]


def test_annee_message_unique_de_plage():
    rules = COURSE_RULES["year"]
    assert validate_field("year", 2020, rules) == []
    assert validate_field("year", 2030, rules) == []
    assert messages(validate_field("year", 2019, rules)) == ["L'année doit être entre 2020 et 2030"]
    assert messages(validate_field("year", 2031, rules)) == ["L'année doit être entre 2020 et 2030"]


def test_note_bornes_inclusives():
    rules = ENROLLMENT_RULES["grade"]
    assert validate_field("grade", 0, rules) == []
    assert validate_field("grade", 20.0, rules) == []
    assert validate_field("grade", 12.5, rules) == []
    assert messages(validate_field("grade", -0.5, rules)) == ["La note doit être au minimum 0"]
    assert messages(validate_field("grade", 20.5, rules)) == ["La note doit être au maximum 20"]


def test_note_non_finie_rejetee():
    rules = ENROLLMENT_RULES["grade"]
    for value in (float("nan"), float("inf"), float("-inf")):
        assert messages(validate_field("grade", value, rules)) == ["La note doit être un nombre fini"]


# --- Choix ---

def test_semestre_choix():
    rules = COURSE_RULES["semester"]
    for semester in ("Automne", "Hiver", "Printemps", "Été"):
        assert validate_field("semester", semester, rules) == []
    found = messages(validate_field("semester", "Ete", rules))
    assert found == ["Le semestre doit être l'un des suivants : Automne, Hiver, Printemps, Été"]


def test_statut_choix():
    rules = ENROLLMENT_RULES["status"]
    assert validate_field("status", "En attente", rules) == []
    assert validate_field("status", "actif", rules)
    assert messages(validate_field("status", None, rules)) == ["Le statut est obligatoire"]


# --- Dates ---

def test_date_de_naissance_strictement_passee():
    rules = STUDENT_RULES["birth_date"]
    assert validate_field("birth_date", date(2000, 5, 15), rules, today=TODAY) == []
    assert validate_field("birth_date", TODAY, rules, today=TODAY)
    assert validate_field("birth_date", date(2030, 1, 1), rules, today=TODAY)


def test_date_de_naissance_datetime_acceptee():
    rules = STUDENT_RULES["birth_date"]
    assert validate_field("birth_date", datetime(2001, 1, 1, 12, 0), rules, today=TODAY) == []


def test_catalogue_de_messages_remplacable():
    catalog = {"first_name": {"required": "First name is required"}}
    found = validate_field("first_name", None, FieldRules(required=True), catalog=catalog)
    assert messages(found) == ["First name is required"]


def test_regle_absente_du_catalogue_message_generique():
    found = validate_field("nickname", 5, FieldRules())
    assert len(found) == 1
    assert "nickname" in found[0].message
