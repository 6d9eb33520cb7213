def _wrua(name: str, **overrides) -> dict:
    payload = {"name": name, "location": "Mara Region", "lat": -1.45, "lng": 35.05, "focus_areas": ["Riparian Restoration"]}
    payload.update(overrides)
    return payload


def _post(title: str, **overrides) -> dict:
    payload = {
        "title": title,
        "content": "<p>Body</p>",
        "excerpt": "Short summary",
        "author": "Communications Team",
        "category": "Conservation",
        "tags": ["River Cleanup"],
    }
    payload.update(overrides)
    return payload


def test_wruas_sorted_by_name_and_searchable(client, auth_headers) -> None:
    for body in (
        _wrua("Sondu River WRUA", location="Sondu Region", focus_areas=["Water Harvesting"]),
        _wrua("awach River WRUA", location="Awach Region", focus_areas=["Wetland Conservation"]),
        _wrua("Kuja River WRUA", location="Kuja Region", status="inactive"),
    ):
        assert client.post("/api/admin/wruas", json=body, headers=auth_headers).status_code == 201

    names = [w["name"] for w in client.get("/api/wruas").json()]
    assert names == ["awach River WRUA", "Kuja River WRUA", "Sondu River WRUA"]

    active = [w["name"] for w in client.get("/api/wruas", params={"status": "active"}).json()]
    assert "Kuja River WRUA" not in active

    by_focus = client.get("/api/wruas", params={"q": "harvesting"}).json()
    assert [w["name"] for w in by_focus] == ["Sondu River WRUA"]


def test_wrua_coordinates_and_validation(client, auth_headers) -> None:
    created = client.post("/api/admin/wruas", json=_wrua("Mara-Serengeti WRUA"), headers=auth_headers).json()
    fetched = client.get(f"/api/wruas/{created['id']}").json()
    assert fetched["lat"] == -1.45
    assert fetched["lng"] == 35.05

    bad_lat = client.post("/api/admin/wruas", json=_wrua("Bad", lat=120), headers=auth_headers)
    assert bad_lat.status_code == 400
    bad_email = client.post("/api/admin/wruas", json=_wrua("Bad", email="not-an-email"), headers=auth_headers)
    assert bad_email.status_code == 400

    r = client.patch(f"/api/admin/wruas/{created['id']}", json={"lat": None}, headers=auth_headers)
    assert r.status_code == 200
    assert r.json()["lat"] is None
    assert r.json()["name"] == "Mara-Serengeti WRUA"

    assert client.get("/api/wruas/missing").status_code == 404


def test_public_blog_hides_drafts(client, auth_headers) -> None:
    published = client.post("/api/admin/blog", json=_post("River Cleanup Campaign"), headers=auth_headers).json()
    draft = client.post(
        "/api/admin/blog", json=_post("Upcoming Partnership", status="draft"), headers=auth_headers
    ).json()
    assert published["slug"] == "river-cleanup-campaign"
    assert published["published_date"]

    public = [p["slug"] for p in client.get("/api/blog").json()]
    assert public == ["river-cleanup-campaign"]
    assert client.get(f"/api/blog/{draft['slug']}").status_code == 404
    assert client.get("/api/blog/river-cleanup-campaign").json()["id"] == published["id"]

    admin = {p["id"] for p in client.get("/api/admin/blog", headers=auth_headers).json()}
    assert admin == {published["id"], draft["id"]}

    client.put(f"/api/admin/blog/{draft['id']}", json={"status": "published"}, headers=auth_headers)
    assert client.get("/api/blog/upcoming-partnership").status_code == 200


def test_blog_ordered_by_published_date(client, auth_headers) -> None:
    client.post("/api/admin/blog", json=_post("Older", published_date="2024-01-10T08:00:00Z"), headers=auth_headers)
    client.post("/api/admin/blog", json=_post("Newer", published_date="2024-06-01T08:00:00Z"), headers=auth_headers)
    client.post(
        "/api/admin/blog",
        json=_post("Training Notes", category="Training", published_date="2024-03-01T08:00:00Z"),
        headers=auth_headers,
    )

    titles = [p["title"] for p in client.get("/api/blog").json()]
    assert titles == ["Newer", "Training Notes", "Older"]

    training = client.get("/api/blog", params={"category": "Training"}).json()
    assert [p["title"] for p in training] == ["Training Notes"]

    searched = client.get("/api/blog", params={"q": "notes"}).json()
    assert [p["title"] for p in searched] == ["Training Notes"]


def test_blog_duplicate_slug_conflicts(client, auth_headers) -> None:
    assert client.post("/api/admin/blog", json=_post("Same Title"), headers=auth_headers).status_code == 201
    r = client.post("/api/admin/blog", json=_post("Same Title"), headers=auth_headers)
    assert r.status_code == 409
    assert r.json() == {"error": "A blog post with this slug already exists"}


def test_funding_crud_and_filters(client, auth_headers) -> None:
    body = {
        "name": "Ecosystem Restoration Grant",
        "source": "UN Environment Programme",
        "amount": "$75,000",
        "deadline": "April 30, 2025",
        "focus_areas": ["Wetland Conservation", "Riparian Restoration"],
        "alignment_score": "High",
        "status": "closing soon",
    }
    created = client.post("/api/admin/funding", json=body, headers=auth_headers)
    assert created.status_code == 201
    item = created.json()
    client.post(
        "/api/admin/funding",
        json={"name": "Climate Adaptation Fund", "source": "African Development Bank", "focus_areas": ["Infrastructure"]},
        headers=auth_headers,
    )

    closing = client.get("/api/funding", params={"status": "closing soon"}).json()
    assert [f["id"] for f in closing] == [item["id"]]
    wetland = client.get("/api/funding", params={"focus_area": "Wetland Conservation"}).json()
    assert [f["id"] for f in wetland] == [item["id"]]

    bad_status = client.post("/api/admin/funding", json={**body, "status": "maybe"}, headers=auth_headers)
    assert bad_status.status_code == 400

    r = client.put(f"/api/admin/funding/{item['id']}", json={"status": "won"}, headers=auth_headers)
    assert r.json()["status"] == "won"
    assert client.get(f"/api/admin/funding/{item['id']}", headers=auth_headers).json()["status"] == "won"

    assert client.delete(f"/api/admin/funding/{item['id']}", headers=auth_headers).status_code == 204
    assert client.get(f"/api/admin/funding/{item['id']}", headers=auth_headers).status_code == 404


def test_search_wildcards_match_literally(client, auth_headers) -> None:
    client.post("/api/admin/wruas", json=_wrua("Nyangores WRUA", focus_areas=["100% Riparian Cover"]), headers=auth_headers)
    client.post("/api/admin/wruas", json=_wrua("Amala WRUA"), headers=auth_headers)
    client.post("/api/admin/blog", json=_post("Field_Day Recap", status="published"), headers=auth_headers)
    client.post("/api/admin/blog", json=_post("Field Day Photos", status="published"), headers=auth_headers)

    assert [w["name"] for w in client.get("/api/wruas", params={"q": "%"}).json()] == ["Nyangores WRUA"]
    assert client.get("/api/wruas", params={"q": "_"}).json() == []

    searched = client.get("/api/blog", params={"q": "field_"}).json()
    assert [p["title"] for p in searched] == ["Field_Day Recap"]
