import base64
import json
from dataclasses import fields, replace

from fastapi.testclient import TestClient

from conftest import ADMIN
from wrua_forum_api.app.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)
from wrua_forum_api.app.main import create_app


def test_admin_routes_require_token(client) -> None:
    r = client.get("/api/admin/messages")
    assert r.status_code == 401
    assert r.json() == {"error": "Access token required"}

    for path in ("/api/admin/projects", "/api/admin/subscribers", "/api/admin/settings"):
        assert client.get(path).status_code == 401
    assert client.post("/api/admin/upload").status_code == 401


def test_bad_tokens_are_forbidden(client, settings) -> None:
    r = client.get("/api/admin/messages", headers={"Authorization": "Bearer not-a-token"})
    assert r.status_code == 403
    assert r.json() == {"error": "Invalid or expired token"}

    expired = create_access_token({"sub": "x", "username": "admin"}, settings.secret_key, expires_in=-60)
    r = client.get("/api/admin/messages", headers={"Authorization": f"Bearer {expired}"})
    assert r.status_code == 403

    foreign = create_access_token({"sub": "x", "username": "admin"}, "another-secret", expires_in=60)
    r = client.get("/api/admin/messages", headers={"Authorization": f"Bearer {foreign}"})
    assert r.status_code == 403


def test_register_and_login(client) -> None:
    r = client.post("/api/admin/register", json=ADMIN)
    assert r.status_code == 201
    user = r.json()
    assert user["username"] == "admin"
    assert "password" not in user

    again = client.post("/api/admin/register", json=ADMIN)
    assert again.status_code == 400
    assert again.json() == {"error": "Username already exists"}

    r = client.post("/api/admin/login", json=ADMIN)
    assert r.status_code == 200
    body = r.json()
    assert body["user"] == user
    r = client.get("/api/admin/messages", headers={"Authorization": f"Bearer {body['token']}"})
    assert r.status_code == 200
    assert r.json() == []


def test_login_failures_are_generic(client) -> None:
    client.post("/api/admin/register", json=ADMIN)
    wrong_password = client.post("/api/admin/login", json={"username": "admin", "password": "nope"})
    unknown_user = client.post("/api/admin/login", json={"username": "ghost", "password": "admin123"})
    assert wrong_password.status_code == unknown_user.status_code == 401
    assert wrong_password.json() == unknown_user.json() == {"error": "Invalid credentials"}


def test_registration_can_be_disabled(settings) -> None:
    with TestClient(create_app(replace(settings, allow_registration=False))) as client:
        r = client.post("/api/admin/register", json=ADMIN)
        assert r.status_code == 403
        assert r.json() == {"error": "Registration is disabled"}


def test_token_round_trip_and_tampering() -> None:
    token = create_access_token({"sub": "abc", "username": "admin"}, "secret", expires_in=60)
    payload = decode_access_token(token, "secret")
    assert payload["sub"] == "abc"
    assert payload["username"] == "admin"

    header, body, signature = token.split(".")
    claims = json.loads(base64.urlsafe_b64decode(body + "=" * (-len(body) % 4)))
    claims["sub"] = "someone-else"
    forged = base64.urlsafe_b64encode(json.dumps(claims).encode()).rstrip(b"=").decode()
    assert decode_access_token(f"{header}.{forged}.{signature}", "secret") is None
    assert decode_access_token("a.b", "secret") is None


def test_password_hashing() -> None:
    stored = hash_password("admin123")
    assert "$" in stored
    assert stored != hash_password("admin123")
    assert verify_password("admin123", stored)
    assert not verify_password("admin124", stored)
    assert not verify_password("admin123", "garbage")


def test_admin_prefix_is_guarded_before_routing(client, auth_headers) -> None:
    for method, path in (
        ("GET", "/api/admin/no-such-resource"),
        ("GET", "/api/admin/upload"),
        ("DELETE", "/api/admin/messages/abc"),
        ("GET", "/api/admin"),
    ):
        r = client.request(method, path)
        assert r.status_code == 401, (method, path)
        assert r.json() == {"error": "Access token required"}
        assert r.headers["WWW-Authenticate"] == "Bearer"

    r = client.request("DELETE", "/api/admin/messages/abc", headers={"Authorization": "Bearer forged"})
    assert r.status_code == 403
    assert r.json() == {"error": "Invalid or expired token"}

    # With a valid token routing takes over again.
    assert client.get("/api/admin/no-such-resource", headers=auth_headers).status_code == 404
    assert client.get("/api/admin/upload", headers=auth_headers).status_code == 405


def test_login_and_register_stay_open(client) -> None:
    assert client.post("/api/admin/register", json=ADMIN).status_code == 201
    assert client.post("/api/admin/login", json=ADMIN).status_code == 200
    assert client.get("/api/admin/login").status_code == 405


def test_token_header_names_hs256(settings) -> None:
    token = create_access_token({"sub": "abc"}, settings.secret_key, expires_in=60)
    header = token.split(".")[0]
    assert json.loads(base64.urlsafe_b64decode(header + "=" * (-len(header) % 4))) == {"alg": "HS256", "typ": "JWT"}
    assert "algorithm" not in {f.name for f in fields(settings)}
