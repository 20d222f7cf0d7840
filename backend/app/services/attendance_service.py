"""
Service métier pour les présences aux cours.
"""

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.models.attendance import Attendance
from app.models.subject import Subject
from app.schemas.attendance import AttendanceCreate, AttendanceFilter, AttendanceUpdate
from app.services.catalog_service import resolve_subject_id

logger = logging.getLogger(__name__)


def list_attendance(db: Session, filters: AttendanceFilter) -> List[Attendance]:
    query = select(Attendance)

    if filters.student_id is not None:
        query = query.where(Attendance.student_id == filters.student_id)
    if filters.subject_id is not None:
        query = query.where(Attendance.subject_id == filters.subject_id)
    if filters.subject_name is not None:
        query = query.join(Subject, Subject.id == Attendance.subject_id).where(
            Subject.name == filters.subject_name
        )

    query = query.order_by(Attendance.visit_day, Attendance.id)
    return db.execute(query).scalars().all()


def create_attendance(db: Session, data: AttendanceCreate) -> Attendance:
    """
    Enregistre une présence.
    Lève LookupError si la matière nommée est inconnue, ValueError si une référence est invalide.
    """
    subject_id = resolve_subject_id(db, data.subject_id, data.subject_name)
    attendance = Attendance(
        student_id=data.student_id,
        subject_id=subject_id,
        visit_day=data.visit_day,
        visited=data.visited,
    )
    db.add(attendance)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ValueError("Étudiant ou matière introuvable.")
    db.refresh(attendance)
    return attendance


def update_attendance(db: Session, attendance_id: int, data: AttendanceUpdate) -> Optional[Attendance]:
    attendance = db.get(Attendance, attendance_id)
    if attendance is None:
        return None

    update_data = data.model_dump(exclude_unset=True)
    subject_name = update_data.pop("subject_name", None)
    if "subject_id" not in update_data and subject_name is not None:
        update_data["subject_id"] = resolve_subject_id(db, None, subject_name)

    for field, value in update_data.items():
        setattr(attendance, field, value)

    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ValueError("Étudiant ou matière introuvable.")
    db.refresh(attendance)
    return attendance


def delete_attendance(db: Session, attendance_id: int) -> bool:
    attendance = db.get(Attendance, attendance_id)
    if attendance is None:
        return False
    db.delete(attendance)
    db.commit()
    return True
