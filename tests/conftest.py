"""
Shared fixtures: an app on in-memory SQLite, a test client and two users
with bearer headers. Tests talk to the HTTP API only.
"""
import pytest
from flask_jwt_extended import create_access_token

from config import TestConfig
from cvforge import create_app
from cvforge.extensions import db
from cvforge.models import User


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        db.create_all()

    yield app

    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def _make_user(app, email, **profile):
    with app.app_context():
        user = User(email=email, **profile)
        db.session.add(user)
        db.session.commit()
        return user.id, {"Authorization": f"Bearer {create_access_token(identity=user.id)}"}


@pytest.fixture
def user(app):
    user_id, headers = _make_user(
        app,
        "ana@example.com",
        first_name="Ana",
        last_name="Silva",
        headline="Backend Engineer",
        summary="Builds APIs.",
    )
    return {"id": user_id, "headers": headers}


@pytest.fixture
def other_user(app):
    user_id, headers = _make_user(app, "bob@example.com", first_name="Bob")
    return {"id": user_id, "headers": headers}


# ============ request helpers ============

def create_item(client, headers, section, payload):
    response = client.post(f"/api/profile/library/{section}", json=payload, headers=headers)
    assert response.status_code == 201, response.get_json()
    return response.get_json()["data"]


def create_cv(client, headers, **payload):
    response = client.post("/api/cv", json=payload, headers=headers)
    assert response.status_code == 201, response.get_json()
    return response.get_json()["data"]


def include(client, headers, cv_id, section, item_id, order=0):
    response = client.post(f"/api/cv/{cv_id}/{section}", json={"item_id": item_id, "order": order}, headers=headers)
    assert response.status_code == 201, response.get_json()
    return response.get_json()["data"]


def create_application(client, headers, **payload):
    payload.setdefault("company", "Acme")
    payload.setdefault("position", "Engineer")
    response = client.post("/api/applications", json=payload, headers=headers)
    assert response.status_code == 201, response.get_json()
    return response.get_json()["data"]


def get_cv(client, headers, cv_id):
    response = client.get(f"/api/cv/{cv_id}", headers=headers)
    assert response.status_code == 200, response.get_json()
    return response.get_json()["data"]
