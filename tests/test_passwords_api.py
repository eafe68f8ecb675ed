"""
/passwords endpoints over HTTP: status codes, JSON shape, auth guard.
"""

import pytest

from models.activity_log import ActivityLog
from models.password_entry import PasswordEntry

GOOGLE_ADS = {
    "websiteName": "Google Ads",
    "clientName": "Acme",
    "email": "a@b.com",
    "password": "x",
    "tags": ["Marketing"],
}


def _post(client, headers, body=GOOGLE_ADS):
    return client.post("/passwords", json=body, headers=headers)


# ─── Auth guard ──────────────────────────────────────────────────────


@pytest.mark.parametrize(
    "method, path",
    [
        ("get", "/passwords"),
        ("get", "/passwords/tags"),
        ("get", "/passwords/1"),
        ("post", "/passwords"),
        ("put", "/passwords/1"),
        ("delete", "/passwords/1"),
    ],
)
def test_requires_bearer_token(client, method, path):
    r = getattr(client, method)(path)
    assert r.status_code == 401
    assert "error" in r.json()


def test_rejected_request_writes_nothing(client, db):
    r = client.post(
        "/passwords",
        json=GOOGLE_ADS,
        headers={"Authorization": "Bearer not-a-jwt"},
    )
    assert r.status_code == 401
    assert r.json() == {"error": "Invalid token"}
    assert db.query(PasswordEntry).count() == 0
    assert db.query(ActivityLog).count() == 0


# ─── Create ──────────────────────────────────────────────────────────


def test_create_returns_201_with_camel_case_entry(client, auth_headers):
    r = _post(client, auth_headers)
    assert r.status_code == 201
    body = r.json()
    assert isinstance(body["id"], int)
    assert body["websiteName"] == "Google Ads"
    assert body["clientName"] == "Acme"
    assert body["email"] == "a@b.com"
    assert body["password"] == "x"
    assert body["notes"] == ""
    assert body["tags"] == ["Marketing"]
    assert body["createdBy"] == "Sarah Johnson"
    assert "createdAt" in body and "updatedAt" in body


def test_create_missing_fields_is_400(client, auth_headers, db):
    r = _post(client, auth_headers, {"websiteName": "Only"})
    assert r.status_code == 400
    assert r.json()["error"] == "Missing required fields: clientName, email, password"
    assert db.query(ActivityLog).count() == 0


def test_create_wrong_type_is_400(client, auth_headers):
    r = _post(client, auth_headers, {**GOOGLE_ADS, "tags": "Marketing"})
    assert r.status_code == 400
    assert "tags" in r.json()["error"]


@pytest.mark.parametrize("field", ["websiteName", "clientName"])
def test_create_over_long_name_is_400(client, auth_headers, db, field):
    r = _post(client, auth_headers, {**GOOGLE_ADS, field: "x" * 300})
    assert r.status_code == 400
    assert field in r.json()["error"]
    assert db.query(PasswordEntry).count() == 0
    assert db.query(ActivityLog).count() == 0


# ─── End-to-end scenario ─────────────────────────────────────────────


def test_create_filter_delete_then_404(client, auth_headers):
    r = _post(client, auth_headers)
    assert r.status_code == 201
    entry_id = r.json()["id"]

    r = client.get("/passwords", params={"tags": "Marketing"}, headers=auth_headers)
    assert r.status_code == 200
    assert [e["id"] for e in r.json()] == [entry_id]

    r = client.delete(f"/passwords/{entry_id}", headers=auth_headers)
    assert r.status_code == 200
    assert r.json() == {"message": "Password entry deleted successfully"}

    r = client.get(f"/passwords/{entry_id}", headers=auth_headers)
    assert r.status_code == 404
    assert r.json() == {"error": "Password entry not found"}


# ─── Read ────────────────────────────────────────────────────────────


def test_list_search_and_tags_query_params(client, auth_headers):
    _post(client, auth_headers)
    _post(client, auth_headers, {**GOOGLE_ADS, "websiteName": "Facebook", "clientName": "FreshBrand Co.",
                                 "tags": ["Social Media"]})

    r = client.get("/passwords", params={"search": "FRESH"}, headers=auth_headers)
    assert [e["websiteName"] for e in r.json()] == ["Facebook"]

    r = client.get("/passwords", params={"tags": "Marketing,Social Media"}, headers=auth_headers)
    assert [e["websiteName"] for e in r.json()] == ["Facebook", "Google Ads"]

    r = client.get("/passwords", params={"search": "fresh", "tags": "Marketing"}, headers=auth_headers)
    assert r.json() == []


def test_get_non_numeric_id_is_404(client, auth_headers):
    r = client.get("/passwords/not-an-id", headers=auth_headers)
    assert r.status_code == 404


def test_tags_endpoint(client, auth_headers, db):
    _post(client, auth_headers, {**GOOGLE_ADS, "tags": ["Zeta", "Alpha"]})
    _post(client, auth_headers, {**GOOGLE_ADS, "tags": ["Alpha", "Beta"]})
    logs_before = db.query(ActivityLog).count()

    r = client.get("/passwords/tags", headers=auth_headers)
    assert r.status_code == 200
    assert r.json() == ["Alpha", "Beta", "Zeta"]
    assert db.query(ActivityLog).count() == logs_before


# ─── Update / delete ─────────────────────────────────────────────────


def test_put_partial_update(client, auth_headers):
    entry_id = _post(client, auth_headers).json()["id"]

    r = client.put(f"/passwords/{entry_id}", json={"notes": "rotated"}, headers=auth_headers)
    assert r.status_code == 200
    body = r.json()
    assert body["notes"] == "rotated"
    assert body["websiteName"] == "Google Ads"
    assert body["password"] == "x"


def test_put_unknown_is_404(client, auth_headers):
    r = client.put("/passwords/999", json={"notes": "x"}, headers=auth_headers)
    assert r.status_code == 404


def test_put_blank_required_is_400(client, auth_headers):
    entry_id = _post(client, auth_headers).json()["id"]
    r = client.put(f"/passwords/{entry_id}", json={"clientName": ""}, headers=auth_headers)
    assert r.status_code == 400
    assert "clientName" in r.json()["error"]


def test_put_over_long_website_name_is_400(client, auth_headers, db):
    entry_id = _post(client, auth_headers).json()["id"]
    r = client.put(f"/passwords/{entry_id}", json={"websiteName": "x" * 300}, headers=auth_headers)
    assert r.status_code == 400
    assert "websiteName" in r.json()["error"]

    db.expire_all()
    assert db.get(PasswordEntry, entry_id).website_name == "Google Ads"
    assert [row.action for row in db.query(ActivityLog)] == ["add"]


def test_delete_unknown_is_404_without_audit(client, auth_headers, db):
    r = client.delete("/passwords/999", headers=auth_headers)
    assert r.status_code == 404
    assert db.query(ActivityLog).count() == 0


# ─── Activity side effects over HTTP ─────────────────────────────────


def test_each_call_leaves_its_activity_row(client, auth_headers, db):
    entry_id = _post(client, auth_headers).json()["id"]
    client.get("/passwords", headers=auth_headers)
    client.get(f"/passwords/{entry_id}", headers=auth_headers)
    client.put(f"/passwords/{entry_id}", json={"websiteName": "Renamed"}, headers=auth_headers)
    client.delete(f"/passwords/{entry_id}", headers=auth_headers)

    rows = db.query(ActivityLog).order_by(ActivityLog.id).all()
    assert [(r.action, r.entry_name) for r in rows] == [
        ("add", "Google Ads"),
        ("view", "Password entries"),
        ("view", "Google Ads"),
        ("edit", "Google Ads"),
        ("delete", "Renamed"),
    ]
    assert {r.admin_name for r in rows} == {"Sarah Johnson"}
