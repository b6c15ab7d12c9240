"""Shared fixtures: an in-memory SQLite store behind the FastAPI app."""
import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("RUN_MIGRATIONS_ON_STARTUP", "false")
os.environ.setdefault("SESSION_SECRET", "test-secret")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from brewhouse.db.session import Base, get_db
from brewhouse.db import models  # noqa
from brewhouse.main import app
from brewhouse.sequencer.stages import DEFAULT_STAGES
from brewhouse.sequencer.ticker import RunRegistry


def signup_payload(username: str = "brewmaster", email: str = "brewmaster@example.com",
                   brewery_name: str = "Hop Valley Brewing") -> dict:
    return {
        "user": {
            "first_name": "Sam",
            "last_name": "Brewer",
            "email": email,
            "username": username,
            "password": "s3cret-hops",
        },
        "brewery": {
            "name": brewery_name,
            "type": "microbrewery",
            "location": "Portland, OR",
            "founded_year": 2015,
        },
    }


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    factory = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
    yield factory
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.state.run_registry = RunRegistry(DEFAULT_STAGES)
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def auth_client(client):
    response = client.post("/api/signup", json=signup_payload())
    assert response.status_code == 201, response.text
    return client
