from cvforge.extensions import db
from cvforge.models import CvWorkInclusion

from conftest import create_cv, create_item, get_cv, include

ACME = {"company": "Acme", "role": "Engineer", "start_date": "2020-01-01", "end_date": "2022-06-30"}


def test_create_work_experience_returns_stored_item(client, user):
    item = create_item(client, user["headers"], "work", dict(ACME, location="  Lisbon  "))

    assert item["company"] == "Acme"
    assert item["location"] == "Lisbon"
    assert item["start_date"] == "2020-01-01"
    assert item["end_date"] == "2022-06-30"
    assert item["is_current"] is False
    assert item["user_id"] == user["id"]


def test_is_current_clears_end_date(client, user):
    item = create_item(client, user["headers"], "work", dict(ACME, is_current=True))
    assert item["is_current"] is True
    assert item["end_date"] is None


def test_end_date_before_start_date_is_rejected(client, user):
    response = client.post(
        "/api/profile/library/work",
        json=dict(ACME, start_date="2022-01-01", end_date="2021-01-01"),
        headers=user["headers"],
    )
    body = response.get_json()
    assert response.status_code == 400
    assert body["status"] == "error"
    assert body["error"] == "ValidationError"
    assert body["details"]


def test_missing_required_field_is_rejected(client, user):
    response = client.post("/api/profile/library/work", json={"company": "Acme"}, headers=user["headers"])
    body = response.get_json()
    assert response.status_code == 400
    fields = {d["field"] for d in body["details"]}
    assert {"role", "start_date"} <= fields


def test_missing_body_is_rejected(client, user):
    response = client.post("/api/profile/library/skills", data="not json", headers=user["headers"])
    assert response.status_code == 400
    assert response.get_json()["message"] == "No JSON data provided"


def test_unknown_section_is_not_found(client, user):
    response = client.get("/api/profile/library/hobbies", headers=user["headers"])
    assert response.status_code == 404
    assert response.get_json()["status"] == "error"


def test_work_and_education_listed_newest_first_with_undated_last(client, user):
    headers = user["headers"]
    create_item(client, headers, "education", {"school": "Undated School"})
    create_item(client, headers, "education", {"school": "Old", "start_date": "2010-09-01"})
    create_item(client, headers, "education", {"school": "New", "start_date": "2015-09-01"})

    response = client.get("/api/profile/library/education", headers=headers)
    assert [e["school"] for e in response.get_json()["data"]] == ["New", "Old", "Undated School"]


def test_skills_listed_in_creation_order(client, user):
    headers = user["headers"]
    for name in ("Python", "SQL", "Docker"):
        create_item(client, headers, "skills", {"name": name})

    response = client.get("/api/profile/library/skills", headers=headers)
    assert [s["name"] for s in response.get_json()["data"]] == ["Python", "SQL", "Docker"]


def test_skill_level_is_normalized_and_checked(client, user):
    skill = create_item(client, user["headers"], "skills", {"name": "Python", "level": "Expert"})
    assert skill["level"] == "expert"

    response = client.post(
        "/api/profile/library/skills", json={"name": "Go", "level": "godlike"}, headers=user["headers"]
    )
    assert response.status_code == 400


def test_project_tech_tags_round_trip(client, user):
    project = create_item(
        client, user["headers"], "projects",
        {"name": "cvforge", "link": "https://example.com/cvforge", "tech": ["Python", "Flask"]},
    )
    assert project["tech"] == ["Python", "Flask"]

    response = client.post(
        "/api/profile/library/projects", json={"name": "bad", "link": "ftp://nope"}, headers=user["headers"]
    )
    assert response.status_code == 400


def test_partial_update_changes_only_supplied_fields(client, user):
    item = create_item(client, user["headers"], "work", dict(ACME, description="Payments"))

    response = client.patch(
        f"/api/profile/library/work/{item['id']}", json={"role": "Senior Engineer"}, headers=user["headers"]
    )
    updated = response.get_json()["data"]
    assert response.status_code == 200
    assert updated["role"] == "Senior Engineer"
    assert updated["company"] == "Acme"
    assert updated["description"] == "Payments"


def test_null_clears_optional_field_but_not_required_one(client, user):
    item = create_item(client, user["headers"], "work", dict(ACME, location="Lisbon"))
    url = f"/api/profile/library/work/{item['id']}"

    response = client.patch(url, json={"location": None, "description": ""}, headers=user["headers"])
    assert response.status_code == 200
    assert response.get_json()["data"]["location"] is None

    response = client.patch(url, json={"company": None}, headers=user["headers"])
    assert response.status_code == 400


def test_update_checks_dates_against_stored_values(client, user):
    item = create_item(client, user["headers"], "work", ACME)

    response = client.patch(
        f"/api/profile/library/work/{item['id']}", json={"end_date": "2019-01-01"}, headers=user["headers"]
    )
    assert response.status_code == 400

    response = client.patch(
        f"/api/profile/library/work/{item['id']}", json={"is_current": True}, headers=user["headers"]
    )
    assert response.get_json()["data"]["end_date"] is None


def test_delete_item_removes_it_from_every_cv(app, client, user):
    headers = user["headers"]
    item = create_item(client, headers, "work", ACME)
    keep = create_item(client, headers, "work", dict(ACME, company="Globex"))
    first = create_cv(client, headers, title="First")
    second = create_cv(client, headers, title="Second")
    for cv in (first, second):
        include(client, headers, cv["id"], "work", item["id"])
        include(client, headers, cv["id"], "work", keep["id"])

    response = client.delete(f"/api/profile/library/work/{item['id']}", headers=headers)
    assert response.status_code == 200

    for cv in (first, second):
        companies = [w["company"] for w in get_cv(client, headers, cv["id"])["work_experiences"]]
        assert companies == ["Globex"]

    with app.app_context():
        remaining = db.session.query(CvWorkInclusion).filter_by(work_experience_id=item["id"]).count()
    assert remaining == 0

    response = client.delete(f"/api/profile/library/work/{item['id']}", headers=headers)
    assert response.status_code == 404
