"""
Modèle SQLAlchemy pour les évaluations (devoirs, examens) d'une matière.
"""

from sqlalchemy import CheckConstraint, Column, Date, ForeignKey, Integer, String

from app.database import Base


class Assignment(Base):
    """Évaluation notée ; weight = contribution relative à la moyenne pondérée."""
    __tablename__ = "assignments"
    __table_args__ = (CheckConstraint("weight >= 0", name="ck_assignments_weight_positive"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    subject_id = Column(Integer, ForeignKey("subjects.id", ondelete="CASCADE"), nullable=False, index=True)
    weight = Column(Integer, nullable=False, default=1)
    date = Column(Date, nullable=False)
