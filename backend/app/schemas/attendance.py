"""
Schémas Pydantic pour les présences.
visit_day est écrit et relu au format JJ.MM.AAAA.
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, field_serializer, field_validator, model_validator

from app.schemas.common import format_day, normalize_label, parse_day, reject_null


class AttendanceCreate(BaseModel):
    """La matière est désignée par subject_id ou par subject_name."""
    student_id: int
    subject_id: Optional[int] = None
    subject_name: Optional[str] = None
    visit_day: date
    visited: bool = False

    @field_validator("visit_day", mode="before")
    @classmethod
    def parse_visit_day(cls, v):
        return parse_day(v)

    @field_validator("subject_name")
    @classmethod
    def subject_name_not_empty(cls, v: Optional[str]) -> Optional[str]:
        return normalize_label(v)

    @model_validator(mode="after")
    def require_subject(self):
        if self.subject_id is None and self.subject_name is None:
            raise ValueError("subject_id ou subject_name est obligatoire.")
        return self


class AttendanceUpdate(BaseModel):
    student_id: Optional[int] = None
    subject_id: Optional[int] = None
    subject_name: Optional[str] = None
    visit_day: Optional[date] = None
    visited: Optional[bool] = None

    @field_validator("student_id", "subject_id", "subject_name", "visit_day", "visited", mode="before")
    @classmethod
    def not_null(cls, v):
        return reject_null(v)

    @field_validator("visit_day", mode="before")
    @classmethod
    def parse_visit_day(cls, v):
        return parse_day(v) if v is not None else v

    @field_validator("subject_name")
    @classmethod
    def subject_name_not_empty(cls, v: Optional[str]) -> Optional[str]:
        return normalize_label(v)


class AttendanceFilter(BaseModel):
    """Filtres de GET /attendance. Sans filtre, toutes les présences sont renvoyées."""
    student_id: Optional[int] = None
    subject_id: Optional[int] = None
    subject_name: Optional[str] = None


class AttendanceResponse(BaseModel):
    id: int
    student_id: int
    subject_id: int
    visit_day: date
    visited: bool

    model_config = {"from_attributes": True}

    @field_serializer("visit_day")
    def serialize_visit_day(self, v: date) -> str:
        return format_day(v)
