"""
Service métier pour l'emploi du temps des groupes.
"""

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.models.schedule import Schedule
from app.schemas.schedule import ScheduleCreate, ScheduleUpdate

logger = logging.getLogger(__name__)


def list_schedules(db: Session, group_id: Optional[int] = None) -> List[Schedule]:
    """Sans groupe : tout l'emploi du temps, trié par groupe puis heure de début."""
    query = select(Schedule)
    if group_id is not None:
        query = query.where(Schedule.group_id == group_id).order_by(Schedule.start_time)
    else:
        query = query.order_by(Schedule.group_id, Schedule.start_time)
    return db.execute(query).scalars().all()


def create_schedule(db: Session, data: ScheduleCreate) -> Schedule:
    """Lève une ValueError si le groupe n'existe pas."""
    schedule = Schedule(**data.model_dump())
    db.add(schedule)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ValueError(f"Groupe {data.group_id} introuvable.")
    db.refresh(schedule)
    logger.info("Créneau %s créé pour le groupe %s.", schedule.id, schedule.group_id)
    return schedule


def update_schedule(db: Session, schedule_id: int, data: ScheduleUpdate) -> Optional[Schedule]:
    schedule = db.get(Schedule, schedule_id)
    if schedule is None:
        return None

    update_data = data.model_dump(exclude_unset=True)
    start = update_data.get("start_time", schedule.start_time)
    end = update_data.get("end_time", schedule.end_time)
    if end <= start:
        raise ValueError("L'heure de fin doit être postérieure à l'heure de début.")

    for field, value in update_data.items():
        setattr(schedule, field, value)

    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ValueError("Groupe introuvable.")
    db.refresh(schedule)
    return schedule


def delete_schedule(db: Session, schedule_id: int) -> bool:
    schedule = db.get(Schedule, schedule_id)
    if schedule is None:
        return False
    db.delete(schedule)
    db.commit()
    return True
