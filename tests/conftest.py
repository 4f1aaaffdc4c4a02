from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from hotel_backend.api import create_app
from hotel_backend.config import Settings
from hotel_backend.db.database import Database
from hotel_backend.db.repo import SQLPropertyRepository
from hotel_backend.models.property import Property

MEMORY_URL = "sqlite:///:memory:"


@pytest.fixture
def database():
    db = Database(MEMORY_URL)
    db.create_schema()
    yield db
    db.dispose()


@pytest.fixture
def repository(database):
    return SQLPropertyRepository(database)


@pytest.fixture
def client(database):
    app = create_app(Settings(database_url=MEMORY_URL), database=database)
    return TestClient(app)


@pytest.fixture
def valid_fields():
    return {
        "name": "Grand Plaza Hotel",
        "city": "Atlanta",
        "state": "GA",
        "rooms": 250,
        "adr": 185.5,
        "occupancy": 0.78,
        "revpar": 144.69,
    }


@pytest.fixture
def make_property():
    return _make_property


def _make_property(idx: int = 0, **overrides) -> Property:
    values = {
        "id": f"p{idx}",
        "name": f"Hotel {idx}",
        "city": "Atlanta",
        "state": "GA",
        "rooms": 100,
        "adr": 150.0,
        "occupancy": 0.7,
        "revpar": 105.0,
        "created_at": datetime(2024, 1, 1, tzinfo=timezone.utc) + timedelta(hours=idx),
    }
    values.update(overrides)
    return Property(**values)
