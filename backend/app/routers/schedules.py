"""
Router pour l'emploi du temps des groupes. Les heures sont au format HH:MM.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import get_current_user_id
from app.schemas.schedule import ScheduleCreate, ScheduleResponse, ScheduleUpdate
from app.services import schedule_service

router = APIRouter(
    prefix="/schedules",
    tags=["Emploi du temps"],
    dependencies=[Depends(get_current_user_id)],
)


@router.get("", response_model=List[ScheduleResponse], summary="Lister les créneaux")
def list_schedules(group_id: Optional[int] = None, db: Session = Depends(get_db)):
    """Sans group_id, retourne l'emploi du temps de tous les groupes."""
    return schedule_service.list_schedules(db, group_id)


@router.post("", response_model=ScheduleResponse, status_code=201, summary="Créer un créneau")
def create_schedule(data: ScheduleCreate, db: Session = Depends(get_db)):
    try:
        return schedule_service.create_schedule(db, data)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.patch("/{schedule_id}", response_model=ScheduleResponse, summary="Modifier un créneau")
def update_schedule(schedule_id: int, data: ScheduleUpdate, db: Session = Depends(get_db)):
    try:
        schedule = schedule_service.update_schedule(db, schedule_id, data)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if schedule is None:
        raise HTTPException(status_code=404, detail="Créneau introuvable.")
    return schedule


@router.delete("/{schedule_id}", status_code=204, summary="Supprimer un créneau")
def delete_schedule(schedule_id: int, db: Session = Depends(get_db)):
    if not schedule_service.delete_schedule(db, schedule_id):
        raise HTTPException(status_code=404, detail="Créneau introuvable.")
