"""
Service métier pour les évaluations et la saisie des notes.
"""

import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.models.assignment import Assignment
from app.models.grade import Grade
from app.models.subject import Subject
from app.schemas.grade import AssignmentCreate, AssignmentFilter, GradeCreate
from app.services.catalog_service import resolve_subject_id

logger = logging.getLogger(__name__)


def list_assignments(db: Session, filters: AssignmentFilter) -> List[Assignment]:
    """Retourne les évaluations, les plus récentes d'abord."""
    query = select(Assignment)

    if filters.subject_id is not None:
        query = query.where(Assignment.subject_id == filters.subject_id)
    if filters.subject_name is not None:
        query = query.join(Subject, Subject.id == Assignment.subject_id).where(
            Subject.name == filters.subject_name
        )

    query = query.order_by(Assignment.date.desc(), Assignment.id.desc())
    return db.execute(query).scalars().all()


def create_assignment(db: Session, data: AssignmentCreate) -> Assignment:
    """Lève LookupError si la matière nommée est inconnue, ValueError si subject_id est invalide."""
    subject_id = resolve_subject_id(db, data.subject_id, data.subject_name)
    assignment = Assignment(
        name=data.name,
        subject_id=subject_id,
        weight=data.weight,
        date=data.date,
    )
    db.add(assignment)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ValueError(f"Matière {subject_id} introuvable.")
    db.refresh(assignment)
    logger.info("Évaluation %s créée (matière %s, poids %s).", assignment.id, subject_id, assignment.weight)
    return assignment


def create_grade(db: Session, data: GradeCreate) -> Grade:
    """Lève une ValueError si l'étudiant ou l'évaluation n'existe pas."""
    grade = Grade(student_id=data.student_id, assignment_id=data.assignment_id, mark=data.mark)
    db.add(grade)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ValueError("Étudiant ou évaluation introuvable.")
    db.refresh(grade)
    logger.info("Note %s saisie pour l'étudiant %s.", grade.id, grade.student_id)
    return grade
