import os

os.environ.setdefault("EDUTRACK_DATABASE_URL", "sqlite://")
os.environ.setdefault("EDUTRACK_SEED_DEMO_DATA", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from backend.app.core.security import get_password_hash
from backend.app.db.base import Base
from backend.app.db.session import build_engine, get_db
from backend.app.main import app
from backend.app.models.student import Student
from backend.app.models.user import User

TEACHER_CREDENTIALS = {"username": "guru", "password": "guru123"}
STUDENT_CREDENTIALS = {"username": "ahmad", "password": "siswa123"}


@pytest.fixture
def engine():
    engine = build_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def school(db):
    """Two students in 10-A, a teacher account and a student account bound to Ahmad."""
    ahmad = Student(name="Ahmad Fauzi", class_name="10-A", parent_name="Budi Santoso", phone="08123456789")
    siti = Student(name="Siti Aminah", class_name="10-A", parent_name="Hasan Basri", phone="08123456780")
    db.add_all([ahmad, siti])
    db.flush()
    db.add_all(
        [
            User(
                username=TEACHER_CREDENTIALS["username"],
                hashed_password=get_password_hash(TEACHER_CREDENTIALS["password"]),
                role="teacher",
            ),
            User(
                username=STUDENT_CREDENTIALS["username"],
                hashed_password=get_password_hash(STUDENT_CREDENTIALS["password"]),
                role="student",
                student_id=ahmad.id,
            ),
        ]
    )
    db.commit()
    return {"ahmad_id": ahmad.id, "siti_id": siti.id}


def login(client: TestClient, credentials: dict):
    response = client.post("/api/login", json=credentials)
    assert response.status_code == 200
    return response


@pytest.fixture
def teacher_client(client, school):
    login(client, TEACHER_CREDENTIALS)
    return client


@pytest.fixture
def student_client(client, school):
    login(client, STUDENT_CREDENTIALS)
    return client
