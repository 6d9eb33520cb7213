from dataclasses import replace

from fastapi.testclient import TestClient

from conftest import ADMIN
from wrua_forum_api.app.main import create_app

PNG = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64


def test_upload_stores_and_serves_image(client, auth_headers, settings) -> None:
    r = client.post("/api/admin/upload", files={"image": ("river.PNG", PNG, "image/png")}, headers=auth_headers)
    assert r.status_code == 200
    url = r.json()["url"]
    assert url.startswith("/uploads/")
    assert url.endswith(".png")

    served = client.get(url)
    assert served.status_code == 200
    assert served.content == PNG


def test_upload_rejections(client, auth_headers) -> None:
    r = client.post("/api/admin/upload", headers=auth_headers)
    assert r.status_code == 400
    assert r.json() == {"error": "No file uploaded"}

    r = client.post("/api/admin/upload", files={"image": ("notes.txt", b"hello", "text/plain")}, headers=auth_headers)
    assert r.status_code == 400

    r = client.post("/api/admin/upload", files={"image": ("fake.png", b"hello", "text/plain")}, headers=auth_headers)
    assert r.status_code == 400

    r = client.post("/api/admin/upload", files={"image": ("photo.exe", PNG, "image/png")}, headers=auth_headers)
    assert r.status_code == 400


def test_upload_size_limit(settings) -> None:
    with TestClient(create_app(replace(settings, max_upload_bytes=32))) as client:
        client.post("/api/admin/register", json=ADMIN)
        token = client.post("/api/admin/login", json=ADMIN).json()["token"]
        r = client.post(
            "/api/admin/upload",
            files={"image": ("big.png", PNG, "image/png")},
            headers={"Authorization": f"Bearer {token}"},
        )
    assert r.status_code == 400
    assert "too large" in r.json()["error"]
