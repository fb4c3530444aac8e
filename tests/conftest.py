"""Shared fixtures: in-memory database, API client, owners and events."""

import os
import tempfile

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-votehub-0123456789abcdef")
os.environ.setdefault("LOG_DIR", os.path.join(tempfile.gettempdir(), "votehub-test-logs"))

import datetime as dt

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from main import app
from votehub.database import Base, get_db
from votehub.models.user import User
from votehub.schemas.event import EventCreate
from votehub.services import event_service


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
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
    yield session
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
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


# ----- API helpers -----

def register(client: TestClient, username: str, password: str = "secret123") -> dict:
    """Register a user and return bearer auth headers."""
    response = client.post("/api/auth/register", json={"username": username, "password": password})
    assert response.status_code == 201, response.text
    token = response.json()["data"]["access_token"]
    return {"Authorization": f"Bearer {token}"}


def event_payload(**overrides) -> dict:
    payload = {
        "name": "Spring Hackathon",
        "date": dt.date.today().isoformat(),
        "start_time": "00:00",
        "close_time": "23:59",
        "groups": [
            {"name": "Judges", "weight": 70, "password": "judgepass"},
            {"name": "Public", "weight": 30},
        ],
        "projects": [
            {"name": "Alpha", "description": "AI thing", "team_members": ["Ann", "Bo"]},
            {"name": "Beta"},
        ],
        "criteria": [
            {"name": "Creativity", "max_score": 10},
            {"name": "Execution", "max_score": 10},
        ],
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def owner_headers(client):
    return register(client, "organizer")


@pytest.fixture
def open_event(client, owner_headers) -> dict:
    """An event created through the API with voting manually opened."""
    response = client.post("/api/events", json=event_payload(), headers=owner_headers)
    assert response.status_code == 201, response.text
    event = response.json()["data"]
    response = client.post(f"/api/events/{event['id']}/open-voting", headers=owner_headers)
    assert response.status_code == 200, response.text
    return response.json()["data"]


# ----- service-level helpers -----

@pytest.fixture
def owner(db) -> User:
    user = User(username="owner", hashed_password="not-used")
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def make_event(db, owner: User, **overrides):
    """Create an event directly through the service layer."""
    payload = event_payload(**overrides)
    return event_service.create_event(db, owner, EventCreate(**payload))
