"""
Moteur de moyenne pondérée exécuté contre une vraie base SQLite en mémoire.
Vérifie que les requêtes d'agrégat produites par gpa_service s'exécutent
et donnent les bons résultats, ce que les tests à session mockée ne couvrent pas.
"""

from datetime import date

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import app.models  # noqa: F401 — enregistre les tables dans Base.metadata
from app.database import Base
from app.models.assignment import Assignment
from app.models.grade import Grade
from app.models.group import Group
from app.models.student import Student
from app.models.subject import Subject
from app.schemas.grade import RankingFilter
from app.services.gpa_service import get_rankings, get_student_gpa


@pytest.fixture
def db():
    """
    Jeu de données :
      - étudiants 1 et 3 : Maths 80 (poids 2) et 90 (poids 3) → 86.0 ;
      - étudiant 2 : une seule note sur une évaluation de poids 0 → 0.0 ;
      - étudiant 4 : aucune note.
    Les étudiants 1, 2 et 4 sont dans le groupe 1, l'étudiant 3 dans le groupe 2.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()

    session.add_all([
        Group(id=1, name="G1"),
        Group(id=2, name="G2"),
        Subject(id=1, name="Maths"),
        Subject(id=2, name="Physique"),
    ])
    session.flush()
    session.add_all([
        Student(id=1, name="Alice", birth_date=date(2003, 1, 1), gender="F", group_id=1),
        Student(id=2, name="Bruno", birth_date=date(2003, 2, 1), gender="M", group_id=1),
        Student(id=3, name="Chloé", birth_date=date(2003, 3, 1), gender="F", group_id=2),
        Student(id=4, name="David", birth_date=date(2003, 4, 1), gender="M", group_id=1),
        Assignment(id=1, name="Interro", subject_id=1, weight=2, date=date(2024, 3, 1)),
        Assignment(id=2, name="Examen", subject_id=1, weight=3, date=date(2024, 6, 1)),
        Assignment(id=3, name="Labo", subject_id=2, weight=0, date=date(2024, 4, 1)),
    ])
    session.flush()
    session.add_all([
        Grade(student_id=1, assignment_id=1, mark=80),
        Grade(student_id=1, assignment_id=2, mark=90),
        Grade(student_id=3, assignment_id=1, mark=80),
        Grade(student_id=3, assignment_id=2, mark=90),
        Grade(student_id=2, assignment_id=3, mark=50),
    ])
    session.commit()

    yield session

    session.close()
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


def as_pairs(entries):
    return [(e.student_id, e.gpa) for e in entries]


# --- get_student_gpa ---

def test_gpa_etudiant_moyenne_ponderee(db):
    assert get_student_gpa(db, 1) == pytest.approx(86.0)


def test_gpa_etudiant_poids_total_nul(db):
    assert get_student_gpa(db, 2) == 0.0


def test_gpa_etudiant_sans_note(db):
    assert get_student_gpa(db, 4) == 0.0


def test_gpa_etudiant_introuvable(db):
    assert get_student_gpa(db, 99) is None


def test_gpa_etudiant_par_matiere(db):
    assert get_student_gpa(db, 1, subject_id=1) == pytest.approx(86.0)
    assert get_student_gpa(db, 1, subject_id=2) == 0.0


# --- get_rankings ---

def test_classement_sans_filtre(db):
    """Égalité à 86.0 départagée par student_id ; l'étudiant sans note n'apparaît pas."""
    result = get_rankings(db, RankingFilter())
    assert as_pairs(result) == [(1, 86.0), (3, 86.0), (2, 0.0)]


def test_classement_all_equivaut_sans_filtre(db):
    result = get_rankings(db, RankingFilter(subject_name="all"))
    assert as_pairs(result) == [(1, 86.0), (3, 86.0), (2, 0.0)]


def test_classement_par_groupe(db):
    result = get_rankings(db, RankingFilter(group_id=1))
    assert as_pairs(result) == [(1, 86.0), (2, 0.0)]


def test_classement_par_nom_de_matiere(db):
    assert as_pairs(get_rankings(db, RankingFilter(subject_name="Maths"))) == [(1, 86.0), (3, 86.0)]
    assert as_pairs(get_rankings(db, RankingFilter(subject_name="Physique"))) == [(2, 0.0)]


def test_classement_par_identifiant_de_matiere(db):
    result = get_rankings(db, RankingFilter(subject_id=2))
    assert as_pairs(result) == [(2, 0.0)]


def test_classement_groupe_et_matiere(db):
    result = get_rankings(db, RankingFilter(group_id=2, subject_name="Maths"))
    assert as_pairs(result) == [(3, 86.0)]


def test_classement_matiere_inconnue_vide(db):
    assert get_rankings(db, RankingFilter(subject_name="Chimie")) == []
