"""
Modèle SQLAlchemy pour la table teachers.
Les cours référencent l'enseignant par teacher_id (pas de relation inverse stockée).
"""

from sqlalchemy import Column, DateTime, Integer, String, Text

from app.database import Base


class Teacher(Base):
    __tablename__ = "teachers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, nullable=False)
    phone = Column(String(20), nullable=True)
    speciality = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)
