"""
/auth endpoints and the bearer-token guard.
"""

from datetime import timedelta

import jwt
import pytest

from conftest import ADMIN_PASSWORD
from core.config import settings
from core.errors import Unauthenticated
from core.security import create_access_token, decode_access_token, hash_password, verify_password
from models.user import User


# ─── Login ───────────────────────────────────────────────────────────


def test_login_returns_user_and_token(client, admin):
    r = client.post("/auth/login", json={"email": "sarah@agency.com", "password": ADMIN_PASSWORD})
    assert r.status_code == 200
    body = r.json()
    assert body["user"] == {"id": admin.id, "name": "Sarah Johnson", "email": "sarah@agency.com", "role": "admin"}

    claims = decode_access_token(body["token"])
    assert claims["user_id"] == admin.id
    assert claims["sub"] == "sarah@agency.com"


def test_login_records_last_login(client, admin, db):
    client.post("/auth/login", json={"email": "sarah@agency.com", "password": ADMIN_PASSWORD})
    db.expire_all()
    assert db.get(User, admin.id).last_login is not None


@pytest.mark.parametrize(
    "email, password",
    [("sarah@agency.com", "wrong-password"), ("nobody@agency.com", ADMIN_PASSWORD)],
)
def test_login_failure_does_not_say_which_part_was_wrong(client, admin, email, password):
    r = client.post("/auth/login", json={"email": email, "password": password})
    assert r.status_code == 401
    assert r.json() == {"error": "Invalid email or password"}


def test_login_disabled_account(client, admin, db):
    admin.is_active = False
    db.commit()
    r = client.post("/auth/login", json={"email": "sarah@agency.com", "password": ADMIN_PASSWORD})
    assert r.status_code == 401
    assert r.json() == {"error": "Account disabled"}


# ─── Register ────────────────────────────────────────────────────────


def test_register_then_profile(client):
    r = client.post(
        "/auth/register",
        json={"name": "Alex Rivera", "email": "Alex@Agency.com", "password": "Str0ngPass"},
    )
    assert r.status_code == 201
    body = r.json()
    assert body["user"]["name"] == "Alex Rivera"
    assert body["user"]["email"] == "alex@agency.com"

    r = client.get("/auth/profile", headers={"Authorization": f"Bearer {body['token']}"})
    assert r.status_code == 200
    assert r.json()["email"] == "alex@agency.com"


def test_register_duplicate_email_is_409(client, admin):
    r = client.post(
        "/auth/register",
        json={"name": "Other Sarah", "email": "sarah@agency.com", "password": "Str0ngPass"},
    )
    assert r.status_code == 409
    assert r.json() == {"error": "Email already exists"}


@pytest.mark.parametrize(
    "password, message",
    [
        ("Sh0rt", "at least 8 characters"),
        ("alllower1", "uppercase"),
        ("ALLUPPER1", "lowercase"),
        ("NoDigitsHere", "digit"),
    ],
)
def test_register_password_policy(client, password, message):
    r = client.post("/auth/register", json={"name": "N", "email": "n@agency.com", "password": password})
    assert r.status_code == 400
    assert message in r.json()["error"]


def test_register_blank_name_is_400(client):
    r = client.post("/auth/register", json={"name": "  ", "email": "n@agency.com", "password": "Str0ngPass"})
    assert r.status_code == 400


def test_register_missing_field_is_400(client):
    r = client.post("/auth/register", json={"email": "n@agency.com", "password": "Str0ngPass"})
    assert r.status_code == 400
    assert "name" in r.json()["error"]


def test_register_over_long_name_is_400(client, db):
    r = client.post("/auth/register", json={"name": "N" * 300, "email": "n@agency.com", "password": "Str0ngPass"})
    assert r.status_code == 400
    assert "name" in r.json()["error"]
    assert db.query(User).count() == 0


# ─── Bearer guard ────────────────────────────────────────────────────


def test_profile_without_token(client):
    r = client.get("/auth/profile")
    assert r.status_code == 401
    assert r.json() == {"error": "Not authenticated"}


def test_expired_token_rejected(client, admin):
    token = create_access_token({"sub": admin.email, "user_id": admin.id}, timedelta(seconds=-5))
    r = client.get("/auth/profile", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 401
    assert r.json() == {"error": "Token expired"}
    assert r.headers["www-authenticate"] == "Bearer"


def test_token_signed_with_other_key_rejected(client, admin):
    token = jwt.encode({"user_id": admin.id}, "some-other-key", algorithm="HS256")
    r = client.get("/auth/profile", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 401


def test_token_for_disabled_admin_rejected(client, admin, auth_headers, db):
    admin.is_active = False
    db.commit()
    r = client.get("/auth/profile", headers=auth_headers)
    assert r.status_code == 401
    assert r.json() == {"error": "User not found or inactive"}


def test_token_without_user_id_claim():
    token = jwt.encode({"sub": "x@y.com"}, settings.secret_key, algorithm="HS256")
    with pytest.raises(Unauthenticated):
        decode_access_token(token)


def test_password_hash_roundtrip(admin_password_hash):
    assert admin_password_hash.startswith("$pbkdf2-sha256$")
    assert verify_password(ADMIN_PASSWORD, admin_password_hash)
    assert not verify_password("nope", admin_password_hash)
    assert hash_password(ADMIN_PASSWORD) != admin_password_hash


# ─── Misc ────────────────────────────────────────────────────────────


def test_health_is_public(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_unknown_route_uses_error_body(client):
    r = client.get("/no-such-route")
    assert r.status_code == 404
    assert r.json() == {"error": "Not Found"}
