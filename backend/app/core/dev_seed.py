import logging
import os

from sqlalchemy.orm import Session

from backend.app.core.security import get_password_hash
from backend.app.models.student import Student
from backend.app.models.user import ROLE_STUDENT, ROLE_TEACHER, User

logger = logging.getLogger(__name__)

DEMO_STUDENTS = [
    ("Ahmad Fauzi", "10-A", "Budi Santoso", "08123456789"),
    ("Siti Aminah", "10-A", "Hasan Basri", "08123456780"),
    ("Budi Pratama", "10-B", "Agus Setiawan", "08123456781"),
    ("Dewi Lestari", "11-A", "Eko Prasetyo", "08123456782"),
]
DEMO_TEACHER = ("guru", "guru123")
DEMO_STUDENT_ACCOUNT = ("ahmad", "siswa123")


def seed_demo_data(db: Session) -> bool:
    """
    Populate an empty database with demo students and accounts.
    Returns False when students already exist.
    """
    if db.query(Student).count() > 0:
        return False

    students = [
        Student(name=name, class_name=class_name, parent_name=parent_name, phone=phone)
        for name, class_name, parent_name, phone in DEMO_STUDENTS
    ]
    db.add_all(students)
    db.flush()

    username, password = DEMO_TEACHER
    db.add(User(username=username, hashed_password=get_password_hash(password), role=ROLE_TEACHER))
    username, password = DEMO_STUDENT_ACCOUNT
    db.add(
        User(
            username=username,
            hashed_password=get_password_hash(password),
            role=ROLE_STUDENT,
            student_id=students[0].id,
        )
    )
    db.commit()
    logger.info("Seeded %d demo students and 2 accounts", len(students))
    return True


def ensure_demo_data(db: Session) -> None:
    """Seed on startup, skipping under pytest to avoid altering test expectations."""
    if os.getenv("PYTEST_CURRENT_TEST"):
        return
    seed_demo_data(db)
