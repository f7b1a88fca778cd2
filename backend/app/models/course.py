"""
Modèle SQLAlchemy pour la table courses.
Le code est unique et toujours stocké en majuscules (normalisé par le service).
"""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text

from app.database import Base


class Course(Base):
    __tablename__ = "courses"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    code = Column(String(20), unique=True, nullable=False)
    credits = Column(Integer, nullable=False)
    max_capacity = Column(Integer, nullable=True)
    semester = Column(String(20), nullable=False)  # Automne, Hiver, Printemps, Été
    year = Column(Integer, nullable=False)
    # RESTRICT : un enseignant qui a des cours ne peut pas être supprimé
    teacher_id = Column(Integer, ForeignKey("teachers.id", ondelete="RESTRICT"), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)
