from datetime import datetime

from cvforge.extensions import db
from cvforge.models import CvDocument, CvWorkInclusion, CvSkillInclusion, LibrarySkill
from cvforge.services import cv_service

from conftest import create_cv, create_item, get_cv, include


def _defaults(client, headers):
    cvs = client.get("/api/cv", headers=headers).get_json()["data"]
    return [cv["id"] for cv in cvs if cv["is_default"]]


def test_first_cv_becomes_default(client, user):
    cv = create_cv(client, user["headers"])
    assert cv["is_default"] is True
    assert cv["title"] == "Main CV"
    assert cv["template"] == "clean_navy"

    second = create_cv(client, user["headers"], title="Second")
    assert second["is_default"] is False
    assert _defaults(client, user["headers"]) == [cv["id"]]


def test_creating_default_cv_clears_previous_default(client, user):
    first = create_cv(client, user["headers"])
    second = create_cv(client, user["headers"], title="Second", is_default=True)

    assert _defaults(client, user["headers"]) == [second["id"]]
    cvs = client.get("/api/cv", headers=user["headers"]).get_json()["data"]
    assert cvs[0]["id"] == second["id"]
    assert first["id"] in [cv["id"] for cv in cvs]


def test_setting_default_swaps_flag(client, user):
    headers = user["headers"]
    first = create_cv(client, headers)
    second = create_cv(client, headers, title="Second")
    third = create_cv(client, headers, title="Third")

    response = client.patch(f"/api/cv/{third['id']}", json={"is_default": True}, headers=headers)
    assert response.status_code == 200
    assert _defaults(client, headers) == [third["id"]]

    response = client.patch(f"/api/cv/{second['id']}", json={"is_default": True}, headers=headers)
    assert _defaults(client, headers) == [second["id"]]
    assert first["id"] not in _defaults(client, headers)


def test_unsetting_current_default_is_rejected(client, user):
    cv = create_cv(client, user["headers"])
    response = client.patch(f"/api/cv/{cv['id']}", json={"is_default": False}, headers=user["headers"])
    assert response.status_code == 400
    assert _defaults(client, user["headers"]) == [cv["id"]]


def test_update_cv_fields(client, user):
    cv = create_cv(client, user["headers"])
    response = client.patch(
        f"/api/cv/{cv['id']}",
        json={"title": "  Backend CV ", "override_summary": "Tailored summary"},
        headers=user["headers"],
    )
    data = response.get_json()["data"]
    assert data["title"] == "Backend CV"
    assert data["override_summary"] == "Tailored summary"

    response = client.patch(f"/api/cv/{cv['id']}", json={"template": "neon"}, headers=user["headers"])
    assert response.status_code == 400

    response = client.patch(f"/api/cv/{cv['id']}", json={"title": None}, headers=user["headers"])
    assert response.status_code == 400


def test_deleting_default_promotes_most_recently_updated(app, client, user):
    headers = user["headers"]
    default = create_cv(client, headers)
    older = create_cv(client, headers, title="Older")
    newer = create_cv(client, headers, title="Newer")
    with app.app_context():
        db.session.get(CvDocument, older["id"]).updated_at = datetime(2024, 1, 1)
        db.session.get(CvDocument, newer["id"]).updated_at = datetime(2024, 6, 1)
        db.session.commit()

    response = client.delete(f"/api/cv/{default['id']}", headers=headers)
    assert response.status_code == 200
    assert _defaults(client, headers) == [newer["id"]]

    response = client.get(f"/api/cv/{default['id']}", headers=headers)
    assert response.status_code == 404


def test_delete_cv_removes_inclusions_but_keeps_library(app, client, user):
    headers = user["headers"]
    skill = create_item(client, headers, "skills", {"name": "Python"})
    cv = create_cv(client, headers)
    include(client, headers, cv["id"], "skills", skill["id"])

    client.delete(f"/api/cv/{cv['id']}", headers=headers)

    with app.app_context():
        assert db.session.query(CvSkillInclusion).filter_by(cv_id=cv["id"]).count() == 0
        assert db.session.get(LibrarySkill, skill["id"]) is not None


def test_add_inclusion_returns_item_with_link(client, user):
    headers = user["headers"]
    skill = create_item(client, headers, "skills", {"name": "Python", "level": "expert"})
    cv = create_cv(client, headers)

    data = include(client, headers, cv["id"], "skills", skill["id"], order=3)
    assert data["id"] == skill["id"]
    assert data["name"] == "Python"
    assert data["order"] == 3
    assert data["inclusion_id"]


def test_duplicate_inclusion_conflicts(client, user):
    headers = user["headers"]
    skill = create_item(client, headers, "skills", {"name": "Python"})
    cv = create_cv(client, headers)
    include(client, headers, cv["id"], "skills", skill["id"])

    response = client.post(f"/api/cv/{cv['id']}/skills", json={"item_id": skill["id"]}, headers=headers)
    assert response.status_code == 409
    assert response.get_json()["error"] == "Conflict"
    assert len(get_cv(client, headers, cv["id"])["skills"]) == 1


def test_item_must_match_section(client, user):
    headers = user["headers"]
    skill = create_item(client, headers, "skills", {"name": "Python"})
    cv = create_cv(client, headers)

    response = client.post(f"/api/cv/{cv['id']}/projects", json={"item_id": skill["id"]}, headers=headers)
    assert response.status_code == 404


def test_negative_order_is_rejected(client, user):
    headers = user["headers"]
    skill = create_item(client, headers, "skills", {"name": "Python"})
    cv = create_cv(client, headers)

    response = client.post(
        f"/api/cv/{cv['id']}/skills", json={"item_id": skill["id"], "order": -1}, headers=headers
    )
    assert response.status_code == 400


def test_composed_cv_sorted_by_order_then_link_creation(app, client, user):
    headers = user["headers"]
    cv = create_cv(client, headers)
    items = {
        name: create_item(client, headers, "work", {"company": name, "role": "Dev", "start_date": "2020-01-01"})
        for name in ("A", "B", "C", "D")
    }
    include(client, headers, cv["id"], "work", items["A"]["id"], order=1)
    include(client, headers, cv["id"], "work", items["B"]["id"], order=1)
    include(client, headers, cv["id"], "work", items["C"]["id"], order=1)
    include(client, headers, cv["id"], "work", items["D"]["id"], order=0)

    # link creation times decide among equal orders: C, A, B
    created = {"C": datetime(2024, 1, 1), "A": datetime(2024, 1, 2), "B": datetime(2024, 1, 3)}
    with app.app_context():
        for name, when in created.items():
            link = db.session.query(CvWorkInclusion).filter_by(work_experience_id=items[name]["id"]).one()
            link.created_at = when
        db.session.commit()

    composed = get_cv(client, headers, cv["id"])
    assert [w["company"] for w in composed["work_experiences"]] == ["D", "C", "A", "B"]
    assert composed["educations"] == []


def test_reorder_and_remove_inclusion(client, user):
    headers = user["headers"]
    cv = create_cv(client, headers)
    first = create_item(client, headers, "skills", {"name": "Python"})
    second = create_item(client, headers, "skills", {"name": "SQL"})
    include(client, headers, cv["id"], "skills", first["id"], order=0)
    include(client, headers, cv["id"], "skills", second["id"], order=1)

    response = client.patch(f"/api/cv/{cv['id']}/skills/{first['id']}", json={"order": 5}, headers=headers)
    assert response.status_code == 200
    assert response.get_json()["data"]["order"] == 5
    assert [s["name"] for s in get_cv(client, headers, cv["id"])["skills"]] == ["SQL", "Python"]

    response = client.delete(f"/api/cv/{cv['id']}/skills/{second['id']}", headers=headers)
    assert response.status_code == 200
    assert [s["name"] for s in get_cv(client, headers, cv["id"])["skills"]] == ["Python"]

    response = client.delete(f"/api/cv/{cv['id']}/skills/{second['id']}", headers=headers)
    assert response.status_code == 404
    response = client.patch(f"/api/cv/{cv['id']}/skills/{second['id']}", json={"order": 1}, headers=headers)
    assert response.status_code == 404


def test_racing_duplicate_inclusion_conflicts_on_unique_constraint(monkeypatch, client, user):
    headers = user["headers"]
    skill = create_item(client, headers, "skills", {"name": "Python"})
    cv = create_cv(client, headers)
    include(client, headers, cv["id"], "skills", skill["id"], order=2)

    # the existence check misses a link inserted concurrently
    monkeypatch.setattr(cv_service, "find_link", lambda section, cv_id, item_id: None)

    response = client.post(f"/api/cv/{cv['id']}/skills", json={"item_id": skill["id"], "order": 7}, headers=headers)
    assert response.status_code == 409
    assert response.get_json()["error"] == "Conflict"

    skills = get_cv(client, headers, cv["id"])["skills"]
    assert len(skills) == 1
    assert skills[0]["order"] == 2
