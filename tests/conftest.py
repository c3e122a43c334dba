"""Pytest fixtures: in-memory database, API client and profile factories.

The app reads DATABASE_URL at import time, so it is pointed at SQLite here
before anything from ``app`` is imported.
"""

import os

os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.db.base import Base
from app.db.session import build_engine, get_db
from app.main import app
from app.models import Gender, InterestedIn, Profile


@pytest.fixture
def engine():
    test_engine = build_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(test_engine)
    yield test_engine
    Base.metadata.drop_all(test_engine)
    test_engine.dispose()


@pytest.fixture
def db(engine):
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(db):
    def _override_get_db():
        yield db

    app.dependency_overrides[get_db] = _override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def create_profile(db):
    """Factory that stores a profile with sensible defaults."""

    def _create(
        id: str,
        interests=(),
        department=None,
        major=None,
        gender=Gender.FEMALE,
        interested_in=InterestedIn.EVERYONE,
        name=None,
        **extra,
    ) -> Profile:
        profile = Profile(
            id=id,
            name=name or id.title(),
            age=20,
            gender=gender,
            interested_in=interested_in,
            department=department,
            major=major,
            interests=list(interests),
            **extra,
        )
        db.add(profile)
        db.commit()
        db.refresh(profile)
        return profile

    return _create
