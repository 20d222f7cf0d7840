"""
Modèle SQLAlchemy pour la table students.
Un étudiant appartient à exactement un groupe.
"""

from sqlalchemy import Column, Date, DateTime, ForeignKey, Integer, String, func

from app.database import Base


class Student(Base):
    __tablename__ = "students"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    birth_date = Column(Date, nullable=False)
    gender = Column(String(20), nullable=False)
    group_id = Column(Integer, ForeignKey("groups.id"), nullable=False, index=True)
    major = Column(String(150), nullable=True)
    course_year = Column(Integer, nullable=True)
    created_at = Column(DateTime, server_default=func.now())
