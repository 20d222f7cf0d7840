"""
Schémas Pydantic pour les évaluations, les notes et la moyenne pondérée (GPA).
"""

import datetime as dt
from typing import Optional

from pydantic import BaseModel, Field, field_serializer, field_validator, model_validator

from app.schemas.common import format_day, normalize_label, parse_day


class AssignmentCreate(BaseModel):
    """La matière est désignée par subject_id ou par subject_name."""
    name: str
    subject_id: Optional[int] = None
    subject_name: Optional[str] = None
    weight: int = Field(ge=0)
    date: dt.date

    @field_validator("name")
    @classmethod
    def name_not_empty(cls, v: str) -> str:
        return normalize_label(v)

    @field_validator("subject_name")
    @classmethod
    def subject_name_not_empty(cls, v: Optional[str]) -> Optional[str]:
        return normalize_label(v)

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, v):
        return parse_day(v)

    @model_validator(mode="after")
    def require_subject(self):
        if self.subject_id is None and self.subject_name is None:
            raise ValueError("subject_id ou subject_name est obligatoire.")
        return self


class AssignmentFilter(BaseModel):
    subject_id: Optional[int] = None
    subject_name: Optional[str] = None


class AssignmentResponse(BaseModel):
    id: int
    name: str
    subject_id: int
    weight: int
    date: dt.date

    model_config = {"from_attributes": True}

    @field_serializer("date")
    def serialize_date(self, v: dt.date) -> str:
        return format_day(v)


class GradeCreate(BaseModel):
    student_id: int
    assignment_id: int
    mark: float = Field(ge=0)


class GradeResponse(BaseModel):
    id: int
    student_id: int
    assignment_id: int
    mark: float

    model_config = {"from_attributes": True}


class StudentGPA(BaseModel):
    """Moyenne pondérée d'un étudiant ; sert aussi d'entrée de classement."""
    student_id: int
    gpa: float


class SubjectGPA(StudentGPA):
    subject_id: int


class RankingFilter(BaseModel):
    """
    Filtres de GET /rankings.
    subject_name="all" signifie « toutes les matières » et est ramené à None ici,
    le moteur de calcul ne connaît que l'absence de filtre.
    """
    group_id: Optional[int] = None
    subject_id: Optional[int] = None
    subject_name: Optional[str] = None

    @field_validator("subject_name")
    @classmethod
    def all_means_no_filter(cls, v: Optional[str]) -> Optional[str]:
        if v is None or not v.strip() or v.strip().lower() == "all":
            return None
        return v.strip()
