"""
Modèle SQLAlchemy pour l'emploi du temps des groupes.
subject est un simple libellé (pas de clé étrangère vers subjects).
"""

from sqlalchemy import Column, ForeignKey, Integer, String, Time

from app.database import Base


class Schedule(Base):
    __tablename__ = "schedule"

    id = Column(Integer, primary_key=True, autoincrement=True)
    group_id = Column(Integer, ForeignKey("groups.id", ondelete="CASCADE"), nullable=False, index=True)
    subject = Column(String(100), nullable=False)
    start_time = Column(Time, nullable=False)
    end_time = Column(Time, nullable=False)
