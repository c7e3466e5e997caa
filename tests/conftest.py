import os
import sys

# Add the current directory to Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

# Must be set before app.core.settings is imported
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_JSON", "false")

import pytest
from sqlalchemy import create_engine, delete
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.errors import UpstreamFailure
from app.db.base_class import Base
# Import all models to ensure their tables are created
from app.models.student import Student


class FakeStudentStore:
    """In-memory StudentStore that records every save call."""

    def __init__(self):
        self.saved: list[Student] = []

    def save(self, student):
        student.id = len(self.saved) + 1
        self.saved.append(student)
        return student

    def find_all(self):
        return list(self.saved)


class FakeSubjectsSource:
    def __init__(self, subjects=None, error=None):
        self.subjects = list(subjects or [])
        self.error = error
        self.calls = 0

    def get_all_subjects(self):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return list(self.subjects)


# Create an in-memory SQLite database for testing
@pytest.fixture(scope="session")
def engine():
    """Create an in-memory SQLite database for testing."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="session")
def TestingSessionLocal(engine):
    """Create a session factory for the test database."""
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)


@pytest.fixture(autouse=True)
def clean_students(TestingSessionLocal):
    """Each test starts with an empty students table."""
    yield
    session = TestingSessionLocal()
    try:
        session.execute(delete(Student))
        session.commit()
    finally:
        session.close()


# Override the database dependency to use our test database
@pytest.fixture
def override_get_db(TestingSessionLocal):
    """Override the database dependency to use our test database."""
    def _override_get_db():
        session = TestingSessionLocal()
        try:
            yield session
        finally:
            session.close()
    return _override_get_db


@pytest.fixture
def db_session(TestingSessionLocal):
    """Create a database session for each test."""
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def subjects_source():
    """Peer subjects-service double; tests set `.subjects` or `.error`."""
    return FakeSubjectsSource(["Math", "Physics", "History"])


@pytest.fixture
def fake_store():
    return FakeStudentStore()


@pytest.fixture
def client(override_get_db, subjects_source):
    """Create a test client for API tests."""
    from fastapi.testclient import TestClient
    from app.main import app
    from app.db import get_db
    from app.deps import get_subjects_source

    # Override the database dependency
    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_subjects_source] = lambda: subjects_source

    with TestClient(app) as client:
        yield client

    # Clear overrides after test
    app.dependency_overrides.clear()


@pytest.fixture
def client_with_fake_store(client, fake_store):
    """Same client, but persistence goes to an in-memory recorder."""
    from app.main import app
    from app.deps import get_student_store

    app.dependency_overrides[get_student_store] = lambda: fake_store
    return client


@pytest.fixture
def unavailable_error():
    return UpstreamFailure("Subjects service is unavailable.")


@pytest.fixture
def test_student(db_session):
    """Create a persisted student."""
    import datetime as dt

    student = Student(name="Test Student", birth_date=dt.date(2001, 5, 17), dni="99999999Z")
    db_session.add(student)
    db_session.commit()
    db_session.refresh(student)
    return student
