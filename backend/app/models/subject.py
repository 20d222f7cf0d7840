"""
Modèle SQLAlchemy pour la table subjects.
Le nom est unique : il sert à la fois de libellé et de clé de recherche (subject_name).
"""

from sqlalchemy import Column, Integer, String

from app.database import Base


class Subject(Base):
    __tablename__ = "subjects"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), unique=True, nullable=False)
