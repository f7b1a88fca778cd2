"""
Tests unitaires des champs dérivés.
"""

from datetime import date

import pytest

from app.core import derived


def test_nom_complet():
    assert derived.full_name("Jean", "Martin") == "Jean Martin"


@pytest.mark.parametrize(
    "grade, expected",
    [
        (0, "Insuffisant"),
        (9.99, "Insuffisant"),
        (10, "Passable"),
        (11.99, "Passable"),
        (12, "Assez bien"),
        (13.5, "Assez bien"),
        (14, "Bien"),
        (15.99, "Bien"),
        (16, "Très bien"),
        (20, "Très bien"),
    ],
)
def test_mention_bornes(grade, expected):
    assert derived.mention(grade) == expected


def test_mention_sans_note():
    assert derived.mention(None) is None


def test_validation_du_cours():
    assert derived.is_passed(9.99) is False
    assert derived.is_passed(10) is True
    assert derived.is_passed(None) is False


@pytest.mark.parametrize("count, expected", [(0, False), (1, False), (2, True), (3, True)])
def test_cours_complet_avec_capacite(count, expected):
    assert derived.is_full(2, count) is expected


@pytest.mark.parametrize("count", [0, 1, 50, 1000])
def test_cours_sans_capacite_jamais_complet(count):
    assert derived.is_full(None, count) is False


def test_age_avant_et_apres_anniversaire():
    birth = date(2000, 5, 15)
    assert derived.age(birth, date(2025, 5, 14)) == 24
    assert derived.age(birth, date(2025, 5, 15)) == 25


def test_age_sans_date_de_naissance():
    assert derived.age(None, date(2025, 1, 1)) is None


def test_age_date_future_jamais_negatif():
    assert derived.age(date(2030, 1, 1), date(2025, 1, 1)) == 0


def test_affichage_cours_avec_enseignant():
    display = derived.course_full_display("MATH301", "Mathématiques Avancées", "Automne", 2024, "Prof Math")
    assert display == "MATH301 - Mathématiques Avancées (Automne 2024) - Prof Math"


def test_affichage_cours_sans_enseignant():
    display = derived.course_full_display("MATH301", "Mathématiques Avancées", "Automne", 2024)
    assert display.endswith("- Aucun enseignant")


def test_affichage_inscription_avec_note():
    display = derived.enrollment_full_display("Jean Martin", "Algèbre Linéaire", "MATH201", "Terminé", 14.5)
    assert display == "Jean Martin inscrit à Algèbre Linéaire (MATH201) - Statut: Terminé - Note: 14.5/20"


def test_affichage_inscription_note_zero_affichee():
    display = derived.enrollment_full_display("Jean Martin", "Algèbre Linéaire", "MATH201", "Terminé", 0)
    assert display.endswith("- Note: 0.0/20")


def test_affichage_inscription_inconnus():
    display = derived.enrollment_full_display(None, None, None, "Actif")
    assert display == "Étudiant inconnu inscrit à Cours inconnu () - Statut: Actif"


def test_predicats_de_statut():
    assert derived.is_active("Actif")
    assert derived.is_completed("Terminé")
    assert derived.is_dropped("Abandonné")
    assert derived.is_pending("En attente")
    assert not derived.is_active("actif")
    assert not derived.is_pending("Actif")
