"""
Schémas Pydantic pour les étudiants.
"""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from app.schemas.common import normalize_label, reject_null


class StudentCreate(BaseModel):
    """Schéma de création d'un étudiant (POST /students)."""
    name: str
    birth_date: date
    gender: str
    group_id: int
    major: Optional[str] = None
    course_year: Optional[int] = Field(default=None, ge=1, le=10)

    @field_validator("name", "gender")
    @classmethod
    def not_empty(cls, v: str) -> str:
        return normalize_label(v)


class StudentUpdate(BaseModel):
    """Schéma de mise à jour partielle (PATCH /students/{id})."""
    name: Optional[str] = None
    birth_date: Optional[date] = None
    gender: Optional[str] = None
    group_id: Optional[int] = None
    major: Optional[str] = None
    course_year: Optional[int] = Field(default=None, ge=1, le=10)

    @field_validator("name", "birth_date", "gender", "group_id", mode="before")
    @classmethod
    def not_null(cls, v):
        return reject_null(v)

    @field_validator("name", "gender")
    @classmethod
    def not_empty(cls, v: Optional[str]) -> Optional[str]:
        return normalize_label(v)


class StudentFilter(BaseModel):
    """Filtres de GET /students. Un champ absent = aucune contrainte."""
    group_id: Optional[int] = None
    major: Optional[str] = None
    course_year: Optional[int] = None
    limit: int = Field(default=20, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class StudentResponse(BaseModel):
    id: int
    name: str
    birth_date: date
    gender: str
    group_id: int
    major: Optional[str]
    course_year: Optional[int]
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class StudentDetailResponse(StudentResponse):
    """Détail d'un étudiant avec le nom de son groupe (GET /students/{id})."""
    group_name: Optional[str] = None
