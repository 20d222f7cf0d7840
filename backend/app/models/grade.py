"""
Modèle SQLAlchemy pour les notes.
Lie un étudiant à une évaluation ; les doublons (student, assignment) ne sont pas bloqués ici.
"""

from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, func

from app.database import Base


class Grade(Base):
    __tablename__ = "grades"

    id = Column(Integer, primary_key=True, autoincrement=True)
    student_id = Column(Integer, ForeignKey("students.id", ondelete="CASCADE"), nullable=False, index=True)
    assignment_id = Column(Integer, ForeignKey("assignments.id", ondelete="CASCADE"), nullable=False, index=True)
    mark = Column(Float, nullable=False)
    created_at = Column(DateTime, server_default=func.now())
