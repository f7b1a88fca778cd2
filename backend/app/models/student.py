"""
Modèle SQLAlchemy pour la table students.
student_number est généré à la création (STU + année + 4 chiffres aléatoires).
"""

from sqlalchemy import Column, Date, DateTime, Integer, String, Text

from app.database import Base


class Student(Base):
    __tablename__ = "students"

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, nullable=False)
    phone = Column(String(20), nullable=True)
    birth_date = Column(Date, nullable=True)
    address = Column(Text, nullable=True)
    student_number = Column(String(20), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)
