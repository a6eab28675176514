from backend.app.core.dev_seed import DEMO_STUDENTS, ensure_demo_data, seed_demo_data
from backend.app.core.security import verify_password
from backend.app.models.student import Student
from backend.app.models.user import User


def test_seed_populates_empty_database(db):
    assert seed_demo_data(db) is True
    assert db.query(Student).count() == len(DEMO_STUDENTS)

    teacher = db.query(User).filter(User.username == "guru").first()
    assert teacher.role == "teacher"
    assert verify_password("guru123", teacher.hashed_password)

    student_user = db.query(User).filter(User.username == "ahmad").first()
    assert student_user.role == "student"
    assert student_user.student.name == "Ahmad Fauzi"


def test_seed_is_skipped_when_students_exist(db, school):
    assert seed_demo_data(db) is False
    assert db.query(Student).count() == 2


def test_ensure_demo_data_skips_under_pytest(db):
    ensure_demo_data(db)
    assert db.query(Student).count() == 0
