"""
Router pour les évaluations, les notes et les classements.
GET  /assignments — évaluations, filtrables par matière
POST /assignments — création (date au format JJ.MM.AAAA)
POST /grades      — saisie d'une note
GET  /rankings    — classement par GPA (groupe, matière ou les deux)
"""

from typing import Annotated, List

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import get_current_user_id
from app.schemas.grade import (
    AssignmentCreate,
    AssignmentFilter,
    AssignmentResponse,
    GradeCreate,
    GradeResponse,
    RankingFilter,
    StudentGPA,
)
from app.services import gpa_service, grade_service

router = APIRouter(tags=["Notes"], dependencies=[Depends(get_current_user_id)])


@router.get("/assignments", response_model=List[AssignmentResponse], summary="Lister les évaluations")
def list_assignments(filters: Annotated[AssignmentFilter, Query()], db: Session = Depends(get_db)):
    return grade_service.list_assignments(db, filters)


@router.post("/assignments", response_model=AssignmentResponse, status_code=201, summary="Créer une évaluation")
def create_assignment(data: AssignmentCreate, db: Session = Depends(get_db)):
    try:
        return grade_service.create_assignment(db, data)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/grades", response_model=GradeResponse, status_code=201, summary="Saisir une note")
def create_grade(data: GradeCreate, db: Session = Depends(get_db)):
    try:
        return grade_service.create_grade(db, data)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/rankings", response_model=List[StudentGPA], summary="Classement par moyenne pondérée")
def get_rankings(filters: Annotated[RankingFilter, Query()], db: Session = Depends(get_db)):
    """
    Classe les étudiants par GPA décroissant (à égalité : student_id croissant).

    - `group_id` : limite aux étudiants du groupe
    - `subject_id` / `subject_name` : limite aux évaluations de la matière
      (`subject_name=all` équivaut à l'absence de filtre)
    - sans filtre : classement de tous les étudiants notés
    """
    return gpa_service.get_rankings(db, filters)
