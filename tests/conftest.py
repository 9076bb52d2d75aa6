# Puts the repository root on sys.path so `from models...` style imports work.
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import pytest

from app import create_app
from database.db import db
from database.store import MemoryTripStore
from models.distance import DistanceTable, Route

DATA_PATH = PROJECT_ROOT / "data" / "mileage_data.json"


@pytest.fixture
def table():
    return DistanceTable([
        Route("Lincoln Elementary", "Washington Middle", 12.0),
        Route("Washington Middle", "Roosevelt High", 8.5),
        Route("Roosevelt High", "Lincoln Elementary", 3.0),
        Route("Central Office", "Lincoln Elementary", 4.2),
    ])


@pytest.fixture
def store():
    return MemoryTripStore()


@pytest.fixture
def app():
    app = create_app({
        "TESTING": True,
        "SECRET_KEY": "test-secret",
        "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
        "MILEAGE_DATA_PATH": str(DATA_PATH),
        "MILEAGE_RATE": 0.7,
    })
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def _register_and_login(client, email, password="hunter22"):
    client.post("/auth/register", json={"email": email, "password": password})
    res = client.post("/auth/login", json={"email": email, "password": password})
    return {"Authorization": f"Bearer {res.get_json()['token']}"}


@pytest.fixture
def auth_headers(client):
    return _register_and_login(client, "driver@example.com")


@pytest.fixture
def other_auth_headers(client):
    return _register_and_login(client, "other@example.com")
