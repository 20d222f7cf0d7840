"""
Router pour les présences. visit_day est au format JJ.MM.AAAA.
"""

from typing import Annotated, List

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import get_current_user_id
from app.schemas.attendance import (
    AttendanceCreate,
    AttendanceFilter,
    AttendanceResponse,
    AttendanceUpdate,
)
from app.services import attendance_service

router = APIRouter(
    prefix="/attendance",
    tags=["Présences"],
    dependencies=[Depends(get_current_user_id)],
)


@router.get("", response_model=List[AttendanceResponse], summary="Lister les présences")
def list_attendance(filters: Annotated[AttendanceFilter, Query()], db: Session = Depends(get_db)):
    """Filtres optionnels : student_id, subject_id, subject_name."""
    return attendance_service.list_attendance(db, filters)


@router.post("", response_model=AttendanceResponse, status_code=201, summary="Enregistrer une présence")
def create_attendance(data: AttendanceCreate, db: Session = Depends(get_db)):
    try:
        return attendance_service.create_attendance(db, data)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.patch("/{attendance_id}", response_model=AttendanceResponse, summary="Modifier une présence")
def update_attendance(attendance_id: int, data: AttendanceUpdate, db: Session = Depends(get_db)):
    try:
        attendance = attendance_service.update_attendance(db, attendance_id, data)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if attendance is None:
        raise HTTPException(status_code=404, detail="Présence introuvable.")
    return attendance


@router.delete("/{attendance_id}", status_code=204, summary="Supprimer une présence")
def delete_attendance(attendance_id: int, db: Session = Depends(get_db)):
    if not attendance_service.delete_attendance(db, attendance_id):
        raise HTTPException(status_code=404, detail="Présence introuvable.")
