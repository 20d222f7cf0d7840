"""
Schémas Pydantic pour l'emploi du temps.
Les heures sont reçues et renvoyées au format HH:MM.
"""

from datetime import time
from typing import Optional

from pydantic import BaseModel, field_serializer, field_validator, model_validator

from app.schemas.common import format_clock, normalize_label, parse_clock, reject_null


class ScheduleCreate(BaseModel):
    group_id: int
    subject: str
    start_time: time
    end_time: time

    @field_validator("subject")
    @classmethod
    def subject_not_empty(cls, v: str) -> str:
        return normalize_label(v)

    @field_validator("start_time", "end_time", mode="before")
    @classmethod
    def parse_time(cls, v):
        return parse_clock(v)

    @model_validator(mode="after")
    def check_interval(self):
        if self.end_time <= self.start_time:
            raise ValueError("L'heure de fin doit être postérieure à l'heure de début.")
        return self


class ScheduleUpdate(BaseModel):
    """Mise à jour partielle ; l'ordre début/fin est vérifié par le service."""
    group_id: Optional[int] = None
    subject: Optional[str] = None
    start_time: Optional[time] = None
    end_time: Optional[time] = None

    @field_validator("group_id", "subject", "start_time", "end_time", mode="before")
    @classmethod
    def not_null(cls, v):
        return reject_null(v)

    @field_validator("subject")
    @classmethod
    def subject_not_empty(cls, v: Optional[str]) -> Optional[str]:
        return normalize_label(v)

    @field_validator("start_time", "end_time", mode="before")
    @classmethod
    def parse_time(cls, v):
        return parse_clock(v) if v is not None else v


class ScheduleResponse(BaseModel):
    id: int
    group_id: int
    subject: str
    start_time: time
    end_time: time

    model_config = {"from_attributes": True}

    @field_serializer("start_time", "end_time")
    def serialize_time(self, v: time) -> str:
        return format_clock(v)
