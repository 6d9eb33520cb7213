from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from wrua_forum_api.app.core.config import Settings
from wrua_forum_api.app.main import create_app

ADMIN = {"username": "admin", "password": "admin123"}


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        secret_key="test-secret",
        database_url=str(tmp_path / "forum.db"),
        upload_dir=str(tmp_path / "uploads"),
    )


@pytest.fixture
def client(settings: Settings):
    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest.fixture
def auth_headers(client: TestClient) -> dict:
    r = client.post("/api/admin/register", json=ADMIN)
    assert r.status_code == 201
    r = client.post("/api/admin/login", json=ADMIN)
    assert r.status_code == 200
    return {"Authorization": f"Bearer {r.json()['token']}"}


def project_payload(**overrides) -> dict:
    payload = {
        "title": "Mara River Riparian Restoration",
        "description": "Native tree planting and erosion control along the Mara River.",
        "location": "Mara Region",
        "category": "Riparian Restoration",
        "impact_metrics": {"trees_planted": "15,000"},
        "sdgs": [6, 13, 15],
    }
    payload.update(overrides)
    return payload
