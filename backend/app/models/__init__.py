# Importe tous les modèles pour enregistrer leurs tables dans Base.metadata
# avant que SQLAlchemy tente de résoudre les clés étrangères inter-modèles.
# courses.teacher_id → teachers.id, enrollments.student_id/course_id → students/courses.

from app.models.teacher import Teacher  # noqa: F401  — doit précéder course
from app.models.student import Student  # noqa: F401
from app.models.course import Course  # noqa: F401
from app.models.enrollment import Enrollment  # noqa: F401
