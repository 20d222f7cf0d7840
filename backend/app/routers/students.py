"""
Router pour les étudiants.
GET    /students                 — listage filtré et paginé
GET    /students/{id}            — détail avec le nom du groupe
POST   /students                 — création
PATCH  /students/{id}            — mise à jour partielle
DELETE /students/{id}            — suppression
GET    /students/{id}/gpa        — moyenne pondérée toutes matières
GET    /students/{id}/subjects/{subject_id}/gpa — moyenne pondérée d'une matière
"""

from typing import Annotated, List

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import get_current_user_id
from app.schemas.grade import StudentGPA, SubjectGPA
from app.schemas.student import (
    StudentCreate,
    StudentDetailResponse,
    StudentFilter,
    StudentResponse,
    StudentUpdate,
)
from app.services import gpa_service, student_service

router = APIRouter(
    prefix="/students",
    tags=["Étudiants"],
    dependencies=[Depends(get_current_user_id)],
)


@router.get("", response_model=List[StudentResponse], summary="Lister les étudiants")
def list_students(filters: Annotated[StudentFilter, Query()], db: Session = Depends(get_db)):
    """Filtres optionnels : group_id, major (contient, insensible à la casse), course_year, limit, offset."""
    return student_service.list_students(db, filters)


@router.get("/{student_id}", response_model=StudentDetailResponse, summary="Détail d'un étudiant")
def get_student(student_id: int, db: Session = Depends(get_db)):
    student = student_service.get_student(db, student_id)
    if student is None:
        raise HTTPException(status_code=404, detail="Étudiant introuvable.")
    return student


@router.post("", response_model=StudentResponse, status_code=201, summary="Créer un étudiant")
def create_student(data: StudentCreate, db: Session = Depends(get_db)):
    try:
        return student_service.create_student(db, data)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.patch("/{student_id}", response_model=StudentResponse, summary="Modifier un étudiant")
def update_student(student_id: int, data: StudentUpdate, db: Session = Depends(get_db)):
    """Met à jour les champs fournis d'un étudiant. Les champs absents ne sont pas modifiés."""
    try:
        student = student_service.update_student(db, student_id, data)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if student is None:
        raise HTTPException(status_code=404, detail="Étudiant introuvable.")
    return student


@router.delete("/{student_id}", status_code=204, summary="Supprimer un étudiant")
def delete_student(student_id: int, db: Session = Depends(get_db)):
    """Supprime définitivement un étudiant. Ses notes et présences sont supprimées en cascade."""
    if not student_service.delete_student(db, student_id):
        raise HTTPException(status_code=404, detail="Étudiant introuvable.")


# --- Moyennes pondérées ---

@router.get("/{student_id}/gpa", response_model=StudentGPA, summary="Moyenne pondérée d'un étudiant")
def get_student_gpa(student_id: int, db: Session = Depends(get_db)):
    gpa = gpa_service.get_student_gpa(db, student_id)
    if gpa is None:
        raise HTTPException(status_code=404, detail="Étudiant introuvable.")
    return StudentGPA(student_id=student_id, gpa=gpa)


@router.get(
    "/{student_id}/subjects/{subject_id}/gpa",
    response_model=SubjectGPA,
    summary="Moyenne pondérée d'un étudiant pour une matière",
)
def get_subject_gpa(student_id: int, subject_id: int, db: Session = Depends(get_db)):
    gpa = gpa_service.get_student_gpa(db, student_id, subject_id=subject_id)
    if gpa is None:
        raise HTTPException(status_code=404, detail="Étudiant introuvable.")
    return SubjectGPA(student_id=student_id, subject_id=subject_id, gpa=gpa)
