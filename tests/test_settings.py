from wrua_forum_api.app.services.settings_service import DEFAULT_STATS


def test_stats_default_when_unset(client) -> None:
    r = client.get("/api/stats")
    assert r.status_code == 200
    assert r.json() == DEFAULT_STATS


def test_settings_upsert_feeds_stats(client, auth_headers) -> None:
    stats = {"wruas": 31, "projects": 46, "hectares": "13,000", "communities": "155"}
    r = client.put("/api/admin/settings/stats", json={"value": stats}, headers=auth_headers)
    assert r.status_code == 200
    assert r.json()["key"] == "stats"
    assert r.json()["value"] == stats
    assert client.get("/api/stats").json() == stats

    client.put("/api/admin/settings/stats", json={"value": {"wruas": 32}}, headers=auth_headers)
    client.put("/api/admin/settings/tagline", json={"value": "Water for all"}, headers=auth_headers)
    settings = client.get("/api/admin/settings", headers=auth_headers).json()
    assert [s["key"] for s in settings] == ["stats", "tagline"]
    assert settings[0]["value"] == {"wruas": 32}

    assert client.get("/api/admin/settings/tagline", headers=auth_headers).json()["value"] == "Water for all"
    assert client.get("/api/admin/settings/missing", headers=auth_headers).status_code == 404


def test_setting_requires_value(client, auth_headers) -> None:
    r = client.put("/api/admin/settings/stats", json={}, headers=auth_headers)
    assert r.status_code == 400
