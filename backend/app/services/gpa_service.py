"""
Moteur de moyenne pondérée (GPA) et de classement.

    GPA = Σ(mark × weight) / Σ(weight)

Les deux sommes sont calculées par la base en une seule requête d'agrégat
(lecture cohérente sur un seul snapshot) ; seule la division est faite en Python.
Un poids total nul donne 0.0.
"""

from typing import Iterable, List, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from app.models.assignment import Assignment
from app.models.grade import Grade
from app.models.student import Student
from app.models.subject import Subject
from app.schemas.grade import RankingFilter, StudentGPA


def _weighted_sums():
    """Colonnes (Σ mark×weight, Σ weight), à 0 quand aucune ligne ne correspond."""
    return (
        func.coalesce(func.sum(Grade.mark * Assignment.weight), 0).label("weighted_sum"),
        func.coalesce(func.sum(Assignment.weight), 0).label("total_weight"),
    )


def weighted_average(weighted_sum, total_weight) -> float:
    if not total_weight:
        return 0.0
    return float(weighted_sum) / float(total_weight)


def rank(entries: Iterable[StudentGPA]) -> List[StudentGPA]:
    """Tri par GPA décroissant ; à égalité, par student_id croissant."""
    return sorted(entries, key=lambda e: (-e.gpa, e.student_id))


def get_student_gpa(db: Session, student_id: int, subject_id: Optional[int] = None) -> Optional[float]:
    """
    GPA d'un étudiant, toutes matières ou pour une seule matière.
    Retourne None si l'étudiant n'existe pas, 0.0 s'il n'a aucune note.
    """
    if db.get(Student, student_id) is None:
        return None

    query = (
        select(*_weighted_sums())
        .select_from(Grade)
        .join(Assignment, Assignment.id == Grade.assignment_id)
        .where(Grade.student_id == student_id)
    )
    if subject_id is not None:
        query = query.where(Assignment.subject_id == subject_id)

    weighted_sum, total_weight = db.execute(query).one()
    return weighted_average(weighted_sum, total_weight)


def get_rankings(db: Session, filters: RankingFilter) -> List[StudentGPA]:
    """
    Classement des étudiants par GPA sur le périmètre groupe / matière / les deux.
    Seuls les étudiants ayant au moins une note dans le périmètre apparaissent.
    """
    query = (
        select(Grade.student_id, *_weighted_sums())
        .select_from(Grade)
        .join(Assignment, Assignment.id == Grade.assignment_id)
    )

    if filters.group_id is not None:
        query = query.join(Student, Student.id == Grade.student_id).where(
            Student.group_id == filters.group_id
        )
    if filters.subject_id is not None:
        query = query.where(Assignment.subject_id == filters.subject_id)
    if filters.subject_name is not None:
        query = query.join(Subject, Subject.id == Assignment.subject_id).where(
            Subject.name == filters.subject_name
        )

    rows = db.execute(query.group_by(Grade.student_id)).all()
    return rank(
        StudentGPA(student_id=student_id, gpa=weighted_average(weighted_sum, total_weight))
        for student_id, weighted_sum, total_weight in rows
    )
