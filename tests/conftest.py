import os

os.environ["TESTING"] = "1"
os.environ.setdefault("TEST_DATABASE_URL", "sqlite://")

import fakeredis
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from clinic.main import app
from clinic.core.database import Base, get_db, get_redis
from clinic.core.permissions import Permission
from clinic.core.security import UserRole
from clinic.schemas.auth import UserCreate
from clinic.services.user_service import UserService

# Shared in-memory database for the whole test session
engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

ADMIN_PASSWORD = "AdminPass123"
STAFF_PASSWORD = "StaffPass123"
DOCTOR_PASSWORD = "DoctorPass123"

def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()

@pytest.fixture(scope="function")
def test_db():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)

@pytest.fixture
def db_session(test_db):
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()

@pytest.fixture
def redis_client():
    return fakeredis.FakeRedis(decode_responses=True)

@pytest.fixture(autouse=True)
def overrides(redis_client):
    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_redis] = lambda: redis_client
    yield
    app.dependency_overrides.clear()

@pytest.fixture
def client(test_db):
    with TestClient(app, base_url="http://testserver") as test_client:
        yield test_client

def create_user(db, username, password, role, **extra):
    return UserService(db).create_user(UserCreate(
        username=username,
        password=password,
        first_name=extra.pop("first_name", username.capitalize()),
        last_name=extra.pop("last_name", "Test"),
        role=role,
        **extra
    ))

def login(test_client, username, password):
    response = test_client.post(
        "/api/login",
        json={"username": username, "password": password}
    )
    assert response.status_code == 200, response.text
    return test_client

@pytest.fixture
def admin_user(db_session):
    return create_user(db_session, "admin", ADMIN_PASSWORD, UserRole.ADMIN, is_admin=True)

@pytest.fixture
def staff_user(db_session):
    return create_user(db_session, "staff", STAFF_PASSWORD, UserRole.STAFF)

@pytest.fixture
def doctor_user(db_session):
    return create_user(
        db_session, "house", DOCTOR_PASSWORD, UserRole.DOCTOR,
        first_name="Gregory", last_name="House", color="#3b82f6"
    )

@pytest.fixture
def admin_client(client, admin_user):
    return login(client, "admin", ADMIN_PASSWORD)

@pytest.fixture
def staff_client(client, staff_user):
    return login(client, "staff", STAFF_PASSWORD)

@pytest.fixture
def reader_client(client, db_session):
    """Client whose user may only read appointments."""
    create_user(
        db_session, "reader", "ReaderPass123", UserRole.STAFF,
        permissions=[Permission.APPOINTMENT_READ]
    )
    return login(client, "reader", "ReaderPass123")

test_patient_data = {
    "firstName": "Marie",
    "lastName": "Curie",
    "dateOfBirth": "1967-11-07",
    "phone": "+33 1 23 45 67 89",
    "email": "marie.curie@example.com",
    "notes": "Allergic to penicillin"
}
