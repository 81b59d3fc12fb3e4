# tests/conftest.py
import os
import sys
from datetime import date

import pytest

# so that `from app import create_app` works when run from the repo root
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from app import create_app  # noqa: E402
from extensions import STORE_KEY, db  # noqa: E402


@pytest.fixture(params=["memory", "sql"])
def app(request):
    app = create_app({
        "TESTING": True,
        "STORE_BACKEND": request.param,
        "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
        "SECRET_KEY": "test-secret",
        "SEED_DEMO": False,
    })
    with app.app_context():
        yield app
        if request.param == "sql":
            db.session.remove()
            db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def store(app):
    return app.extensions[STORE_KEY]


@pytest.fixture()
def alice(store):
    return store.create_user("alice", "alice-secret")


@pytest.fixture()
def bob(store):
    return store.create_user("bob", "bob-secret")


def authenticate(client, user_id: int) -> None:
    with client.session_transaction() as session:
        session["_user_id"] = str(user_id)
        session["_fresh"] = True


def crop_draft(**overrides):
    draft = {
        "name": "Corn",
        "quantity": 50,
        "planted_date": date(2024, 4, 1),
        "expected_harvest_date": date(2024, 7, 1),
        "status": "Growing",
    }
    draft.update(overrides)
    return draft


def item_draft(**overrides):
    draft = {"name": "Seed corn", "category": "Seeds", "quantity": 10, "unit": "bags"}
    draft.update(overrides)
    return draft


def task_draft(**overrides):
    draft = {
        "title": "Water field",
        "description": "North field",
        "due_date": date(2024, 5, 1),
        "priority": "High",
        "completed": False,
    }
    draft.update(overrides)
    return draft
