"""
Schémas Pydantic pour les groupes et les matières (lecture seule).
"""

from typing import Optional

from pydantic import BaseModel


class GroupResponse(BaseModel):
    id: int
    name: str
    department: Optional[str]

    model_config = {"from_attributes": True}


class SubjectResponse(BaseModel):
    id: int
    name: str

    model_config = {"from_attributes": True}
