"""
Shared pytest fixtures.

Every test gets its own in-memory SQLite database, so tests never see each
other's users, movies or session.
"""

from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient

from movie_watchlist.api.dependencies import get_coordinator
from movie_watchlist.api.main import app
from movie_watchlist.core import Coordinator, MoviePayload
from movie_watchlist.database.connection import DatabaseManager, MEMORY_DB_PATH


class StepClock:
    """Deterministic clock: each call is one second after the previous."""

    def __init__(self, start=datetime(2024, 1, 1, 12, 0, 0)):
        self.now = start

    def __call__(self):
        self.now = self.now + timedelta(seconds=1)
        return self.now


@pytest.fixture
def db_manager():
    """In-memory database with all tables created."""
    manager = DatabaseManager(db_path=MEMORY_DB_PATH)
    manager.create_tables()
    yield manager
    manager.close()


@pytest.fixture
def session(db_manager):
    """Unit-of-work session for store-level tests; committed on success."""
    with db_manager.session_scope() as session:
        yield session


@pytest.fixture
def clock():
    return StepClock()


@pytest.fixture
def coordinator(db_manager):
    return Coordinator(db_manager)


@pytest.fixture
def client(coordinator):
    """TestClient bound to a fresh coordinator."""
    app.dependency_overrides[get_coordinator] = lambda: coordinator
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def make_payload(title="The Godfather", **overrides) -> MoviePayload:
    """Build a valid movie payload, overriding any field."""
    fields = {
        "title": title,
        "description": "A crime saga.",
        "genre": "Crime",
        "image_url": "https://example.com/image.jpg",
        "cover_image_url": "https://example.com/cover.jpg",
    }
    fields.update(overrides)
    return MoviePayload(**fields)


@pytest.fixture
def payload_factory():
    return make_payload
