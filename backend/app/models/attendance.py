"""
Modèle SQLAlchemy pour les présences aux cours.
"""

from sqlalchemy import Boolean, Column, Date, ForeignKey, Integer

from app.database import Base


class Attendance(Base):
    """Présence (ou absence) d'un étudiant à une matière pour un jour donné."""
    __tablename__ = "attendance"

    id = Column(Integer, primary_key=True, autoincrement=True)
    student_id = Column(Integer, ForeignKey("students.id", ondelete="CASCADE"), nullable=False, index=True)
    subject_id = Column(Integer, ForeignKey("subjects.id", ondelete="CASCADE"), nullable=False, index=True)
    visit_day = Column(Date, nullable=False)
    visited = Column(Boolean, nullable=False, default=False)
