"""
Router en lecture seule pour les groupes et les matières.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import get_current_user_id
from app.schemas.group import GroupResponse, SubjectResponse
from app.services import catalog_service

router = APIRouter(tags=["Référentiel"], dependencies=[Depends(get_current_user_id)])


@router.get("/groups", response_model=List[GroupResponse], summary="Lister les groupes")
def list_groups(db: Session = Depends(get_db)):
    return catalog_service.list_groups(db)


@router.get("/groups/{group_id}", response_model=GroupResponse, summary="Détail d'un groupe")
def get_group(group_id: int, db: Session = Depends(get_db)):
    group = catalog_service.get_group(db, group_id)
    if group is None:
        raise HTTPException(status_code=404, detail="Groupe introuvable.")
    return group


@router.get("/subjects", response_model=List[SubjectResponse], summary="Lister les matières")
def list_subjects(db: Session = Depends(get_db)):
    """Matières triées par nom."""
    return catalog_service.list_subjects(db)
