import itertools
import os
from types import SimpleNamespace

TEST_DB_FILE = "test_thesis_guidance.db"
TEST_DB_URL = f"sqlite:///./{TEST_DB_FILE}"

# must be set before the app (and its engine/settings) are imported
os.environ["DATABASE_URL"] = TEST_DB_URL
os.environ["JWT_SECRET_KEY"] = "test-secret-key"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from thesis_guidance.core.config import get_settings  # noqa: E402
from thesis_guidance.core.deps import get_db  # noqa: E402
from thesis_guidance.core.security import create_access_token, hash_password  # noqa: E402
from thesis_guidance.db.base import Base  # noqa: E402
from thesis_guidance.main import app  # noqa: E402
from thesis_guidance.models.guidance_session import GuidanceSession  # noqa: E402
from thesis_guidance.models.lecturer import Lecturer  # noqa: E402
from thesis_guidance.models.student import Student  # noqa: E402
from thesis_guidance.models.thesis import Thesis, ThesisLecturer  # noqa: E402
from thesis_guidance.models.user import User, UserRole  # noqa: E402

PASSWORD = "password123"
# hashing is deliberately slow; seed users share one hash
PASSWORD_HASH = hash_password(PASSWORD)

engine = create_engine(
    TEST_DB_URL,
    connect_args={"check_same_thread": False},
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(scope="session", autouse=True)
def setup_test_db():
    """Create a fresh schema once for the whole test session."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()
    if os.path.exists(TEST_DB_FILE):
        os.remove(TEST_DB_FILE)


@pytest.fixture(autouse=True)
def clean_tables():
    """Every test starts from empty tables (child -> parent)."""
    with engine.begin() as conn:
        for table in reversed(Base.metadata.sorted_tables):
            conn.execute(table.delete())
    yield


@pytest.fixture()
def db():
    # objects handed to tests stay readable after later commits
    session = TestingSessionLocal(expire_on_commit=False)
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client():
    """Test client that uses the test DB session via dependency override."""
    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.pop(get_db, None)


@pytest.fixture()
def settings():
    return get_settings()


@pytest.fixture()
def auth_header(settings):
    def _header(user: User) -> dict:
        return {"Authorization": f"Bearer {create_access_token(user.id, settings)}"}

    return _header


@pytest.fixture()
def make_user(db):
    counter = itertools.count(1)

    def _make(role: UserRole = UserRole.STUDENT, username: str | None = None) -> User:
        username = username or f"{role.value.lower()}{next(counter)}"
        user = User(
            username=username,
            email=f"{username}@example.com",
            password_hash=PASSWORD_HASH,
            role=role,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make


@pytest.fixture()
def make_student(db, make_user):
    counter = itertools.count(1)

    def _make(full_name: str = "Student One") -> Student:
        user = make_user(UserRole.STUDENT)
        student = Student(
            user_id=user.id,
            student_id=f"STU{next(counter):04d}",
            full_name=full_name,
        )
        db.add(student)
        db.commit()
        db.refresh(student)
        return student

    return _make


@pytest.fixture()
def make_lecturer(db, make_user):
    counter = itertools.count(1)

    def _make(full_name: str = "Lecturer One") -> Lecturer:
        user = make_user(UserRole.LECTURER)
        lecturer = Lecturer(
            user_id=user.id,
            lecturer_id=f"LEC{next(counter):04d}",
            full_name=full_name,
        )
        db.add(lecturer)
        db.commit()
        db.refresh(lecturer)
        return lecturer

    return _make


@pytest.fixture()
def world(db, make_user, make_student, make_lecturer):
    """A student, two lecturers and an admin, ready to build theses on."""
    student = make_student("Siti Rahma")
    first = make_lecturer("Dr. Budi")
    second = make_lecturer("Dr. Ayu")
    admin = make_user(UserRole.ADMIN)

    student_user = db.get(User, student.user_id)
    first_user = db.get(User, first.user_id)

    return SimpleNamespace(
        student=student,
        student_user=student_user,
        lecturers=[first, second],
        lecturer_user=first_user,
        admin=admin,
    )


@pytest.fixture()
def thesis(db, world):
    """A thesis for `world.student`, supervised by both lecturers."""
    thesis = Thesis(student_id=world.student.id, title="Graph-based timetabling")
    db.add(thesis)
    db.flush()
    for position, lecturer in enumerate(world.lecturers):
        db.add(ThesisLecturer(thesis_id=thesis.id, lecturer_id=lecturer.id, is_primary=position == 0))
    db.commit()
    db.refresh(thesis)
    return thesis


@pytest.fixture()
def guidance(db, thesis):
    guidance = GuidanceSession(thesis_id=thesis.id, notes="Kickoff")
    db.add(guidance)
    db.commit()
    db.refresh(guidance)
    return guidance
