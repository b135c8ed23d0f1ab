"""Общая конфигурация тестов: SQLite в памяти вместо PostgreSQL."""

import os

# До импорта приложения: конфиг читается при импорте модулей
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("ALGORITHM", "HS256")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from main import app
from alumni.core.db import Base, get_db, make_engine
from alumni.core.security import create_access_token
from alumni.models.user import User

engine = make_engine("sqlite://", poolclass=StaticPool)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db):
    def override_get_db():
        session = TestingSessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


def _make_user(db, keycloak_id: str, name: str) -> User:
    user = User(keycloak_id=keycloak_id, name=name, bio=f"{name} bio", status="alumni")
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def alice(db):
    return _make_user(db, "kc-alice", "Alice")


@pytest.fixture
def bob(db):
    return _make_user(db, "kc-bob", "Bob")


@pytest.fixture
def carol(db):
    return _make_user(db, "kc-carol", "Carol")


def auth_headers(user: User) -> dict:
    return {"Authorization": f"Bearer {create_access_token(user.keycloak_id)}"}


@pytest.fixture
def session_factory():
    return TestingSessionLocal


@pytest.fixture
def auth():
    return auth_headers
