# Importe tous les modèles pour enregistrer leurs tables dans Base.metadata
# avant que SQLAlchemy tente de résoudre les clés étrangères inter-modèles.
# Sans cet import, les FK comme grades.assignment_id → assignments.id échouent
# avec NoReferencedTableError si assignment.py n'est pas chargé avant grade.py.

from app.models.user import User  # noqa: F401
from app.models.group import Group  # noqa: F401  — doit précéder student et schedule
from app.models.subject import Subject  # noqa: F401  — doit précéder assignment et attendance
from app.models.student import Student  # noqa: F401
from app.models.assignment import Assignment  # noqa: F401
from app.models.grade import Grade  # noqa: F401
from app.models.attendance import Attendance  # noqa: F401
from app.models.schedule import Schedule  # noqa: F401
