"""
Shared fixtures: in-memory SQLite database and session-aware test clients
"""
import os

os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.main import app
from app.core.database import Base, get_db
from app.core.security import hash_password
from app.models import User, Theme, Tag, Livestream, LivestreamTag, ReservationSlot

# 2023-11-25T01:00:00Z, start of the default reservation term
TERM_START = 1700874000
HOUR = 3600

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(autouse=True)
def setup_database():
    Base.metadata.create_all(bind=engine)
    app.dependency_overrides[get_db] = override_get_db
    yield
    app.dependency_overrides.clear()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def make_client():
    """Factory for independent clients, one cookie jar each"""
    def _make_client():
        return TestClient(app)
    return _make_client


@pytest.fixture
def create_user(db):
    """Factory to create a user with a theme"""
    def _create_user(name="alice", password="password", dark_mode=False, **kwargs):
        user = User(
            name=name,
            display_name=kwargs.get("display_name", name.title()),
            description=kwargs.get("description", f"{name} streams"),
            password=hash_password(password),
        )
        db.add(user)
        db.flush()
        db.add(Theme(user_id=user.id, dark_mode=dark_mode))
        db.commit()
        db.refresh(user)
        return user
    return _create_user


@pytest.fixture
def login():
    def _login(client, name="alice", password="password"):
        response = client.post("/api/login", json={"username": name, "password": password})
        assert response.status_code == 200
        return client
    return _login


@pytest.fixture
def create_tag(db):
    def _create_tag(name):
        tag = Tag(name=name)
        db.add(tag)
        db.commit()
        db.refresh(tag)
        return tag
    return _create_tag


@pytest.fixture
def create_slots(db):
    """Factory for consecutive hourly slots starting at start_at"""
    def _create_slots(count=2, capacity=1, start_at=TERM_START):
        slots = []
        for i in range(count):
            slot = ReservationSlot(
                slot=capacity,
                start_at=start_at + i * HOUR,
                end_at=start_at + (i + 1) * HOUR,
            )
            db.add(slot)
            slots.append(slot)
        db.commit()
        return slots
    return _create_slots


@pytest.fixture
def create_livestream(db):
    """Factory to insert a livestream directly, bypassing reservation"""
    def _create_livestream(owner, title="stream", tags=(), start_at=TERM_START, end_at=TERM_START + HOUR):
        livestream = Livestream(
            user_id=owner.id,
            title=title,
            description=f"{title} description",
            playlist_url=f"https://media.example.com/{title}/playlist.m3u8",
            thumbnail_url=f"https://media.example.com/{title}/thumbnail.jpg",
            start_at=start_at,
            end_at=end_at,
        )
        db.add(livestream)
        db.flush()
        for tag in tags:
            db.add(LivestreamTag(livestream_id=livestream.id, tag_id=tag.id))
        db.commit()
        db.refresh(livestream)
        return livestream
    return _create_livestream


@pytest.fixture
def session_factory():
    """Session factory bound to the test database, for code that opens its own sessions"""
    return TestingSessionLocal
