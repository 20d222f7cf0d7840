"""
Modèle SQLAlchemy pour la table groups (groupes d'étudiants).
"""

from sqlalchemy import Column, Integer, String

from app.database import Base


class Group(Base):
    __tablename__ = "groups"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), unique=True, nullable=False)
    department = Column(String(150), nullable=True)
