"""
Service métier pour la gestion des étudiants.
"""

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.models.group import Group
from app.models.student import Student
from app.schemas.student import (
    StudentCreate,
    StudentDetailResponse,
    StudentFilter,
    StudentResponse,
    StudentUpdate,
)

logger = logging.getLogger(__name__)


def list_students(db: Session, filters: StudentFilter) -> List[Student]:
    """Retourne les étudiants correspondant aux filtres, triés par identifiant."""
    query = select(Student)

    if filters.group_id is not None:
        query = query.where(Student.group_id == filters.group_id)
    if filters.major is not None:
        query = query.where(Student.major.ilike(f"%{filters.major}%"))
    if filters.course_year is not None:
        query = query.where(Student.course_year == filters.course_year)

    query = query.order_by(Student.id).limit(filters.limit).offset(filters.offset)
    return db.execute(query).scalars().all()


def get_student(db: Session, student_id: int) -> Optional[StudentDetailResponse]:
    """Retourne un étudiant avec le nom de son groupe, ou None si inexistant."""
    row = db.execute(
        select(Student, Group.name)
        .outerjoin(Group, Group.id == Student.group_id)
        .where(Student.id == student_id)
    ).first()
    if row is None:
        return None

    student, group_name = row
    return StudentDetailResponse(
        **StudentResponse.model_validate(student).model_dump(),
        group_name=group_name,
    )


def create_student(db: Session, data: StudentCreate) -> Student:
    """
    Crée un étudiant.
    Lève une ValueError si le groupe référencé n'existe pas.
    """
    student = Student(**data.model_dump())
    db.add(student)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ValueError(f"Groupe {data.group_id} introuvable.")
    db.refresh(student)
    logger.info("Étudiant %s créé dans le groupe %s.", student.id, student.group_id)
    return student


def update_student(db: Session, student_id: int, data: StudentUpdate) -> Optional[Student]:
    """Met à jour les champs fournis. Les champs absents ne sont pas modifiés."""
    student = db.get(Student, student_id)
    if student is None:
        return None

    update_data = data.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        setattr(student, field, value)

    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ValueError("Groupe introuvable.")
    db.refresh(student)
    return student


def delete_student(db: Session, student_id: int) -> bool:
    """
    Supprime un étudiant ; ses notes et présences partent en cascade.
    Retourne True si supprimé, False si introuvable.
    """
    student = db.get(Student, student_id)
    if student is None:
        return False

    db.delete(student)
    db.commit()
    logger.info("Étudiant %s supprimé.", student_id)
    return True
