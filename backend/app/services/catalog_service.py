"""
Service de lecture des groupes et des matières, et résolution des références de matière.
"""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.models.group import Group
from app.models.subject import Subject


def list_groups(db: Session) -> List[Group]:
    return db.execute(select(Group).order_by(Group.id)).scalars().all()


def get_group(db: Session, group_id: int) -> Optional[Group]:
    return db.get(Group, group_id)


def list_subjects(db: Session) -> List[Subject]:
    return db.execute(select(Subject).order_by(Subject.name)).scalars().all()


def resolve_subject_id(db: Session, subject_id: Optional[int], subject_name: Optional[str]) -> Optional[int]:
    """
    Ramène une référence de matière (id ou nom) à un identifiant.
    subject_id est prioritaire ; un nom inconnu lève LookupError.
    """
    if subject_id is not None:
        return subject_id
    if subject_name is None:
        return None

    found = db.execute(
        select(Subject.id).where(Subject.name == subject_name)
    ).scalar_one_or_none()
    if found is None:
        raise LookupError(f"Matière '{subject_name}' introuvable.")
    return found
