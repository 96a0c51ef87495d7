"""Tests for the GPT configuration endpoints."""


def new_gpt(**overrides):
    payload = {
        "name": "Sales Assistant",
        "image": 5,
        "description": "Answers questions about sales.",
        "goal": "Help users with sales strategies.",
        "temperature": 0.7,
        "capabilities": ["Answer questions", "Write copy"],
        "limitations": ["No real-time data"],
        "is_public": False,
    }
    payload.update(overrides)
    return payload


def create(client, headers, **overrides):
    response = client.post("/gpts", json=new_gpt(**overrides), headers=headers)
    assert response.status_code == 201
    return response.json()["data"]


def test_create_and_fetch_gpt(client, auth_headers):
    created = create(client, auth_headers)

    data = client.get(f"/gpts/{created['id']}", headers=auth_headers).json()["data"]

    assert data["name"] == "Sales Assistant"
    assert data["capabilities"] == ["Answer questions", "Write copy"]
    assert data["temperature"] == 0.7


def test_duplicate_name_is_a_conflict(client, auth_headers, other_headers):
    create(client, auth_headers)

    response = client.post("/gpts", json=new_gpt(), headers=auth_headers)
    assert response.status_code == 409

    # names are unique per owner only
    create(client, other_headers)


def test_validation_limits(client, auth_headers):
    assert client.post("/gpts", json=new_gpt(image=22), headers=auth_headers).status_code == 422
    assert client.post("/gpts", json=new_gpt(temperature=1.5), headers=auth_headers).status_code == 422
    assert client.post("/gpts", json=new_gpt(capabilities=[]), headers=auth_headers).status_code == 422
    assert client.post("/gpts", json=new_gpt(limitations=["x"] * 11), headers=auth_headers).status_code == 422


def test_visibility_of_private_and_public_gpts(client, auth_headers, other_headers):
    private = create(client, auth_headers, name="Private")
    public = create(client, auth_headers, name="Public", is_public=True)

    listed = client.get("/gpts", headers=other_headers).json()["data"]["data"]

    assert [gpt["name"] for gpt in listed] == ["Public"]
    assert client.get(f"/gpts/{private['id']}", headers=other_headers).status_code == 404
    assert client.get(f"/gpts/{public['id']}", headers=other_headers).status_code == 200
    assert client.put(f"/gpts/{public['id']}", json={"goal": "Hijack"}, headers=other_headers).status_code == 404


def test_list_search_and_sort(client, auth_headers):
    create(client, auth_headers, name="Beta", temperature=0.2)
    create(client, auth_headers, name="Alpha", temperature=0.9, goal="Plan marketing campaigns.")

    by_name = client.get("/gpts?order_by=name", headers=auth_headers).json()["data"]["data"]
    assert [gpt["name"] for gpt in by_name] == ["Alpha", "Beta"]

    found = client.get("/gpts?search=marketing", headers=auth_headers).json()["data"]["data"]
    assert [gpt["name"] for gpt in found] == ["Alpha"]

    assert client.get("/gpts?order_by=image", headers=auth_headers).status_code == 400


def test_update_gpt(client, auth_headers):
    created = create(client, auth_headers)
    create(client, auth_headers, name="Taken")

    response = client.put(
        f"/gpts/{created['id']}",
        json={"temperature": 0.1, "limitations": ["Offline only"]},
        headers=auth_headers,
    )

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["temperature"] == 0.1
    assert data["limitations"] == ["Offline only"]
    assert data["name"] == "Sales Assistant"

    clash = client.put(f"/gpts/{created['id']}", json={"name": "Taken"}, headers=auth_headers)
    assert clash.status_code == 409


def test_delete_is_soft_and_frees_the_name(client, auth_headers):
    created = create(client, auth_headers)

    assert client.delete(f"/gpts/{created['id']}", headers=auth_headers).status_code == 200
    assert client.get(f"/gpts/{created['id']}", headers=auth_headers).status_code == 404
    assert client.get("/gpts", headers=auth_headers).json()["data"]["meta"]["item_count"] == 0

    create(client, auth_headers)


def test_name_clash_at_commit_is_a_conflict(client, auth_headers, monkeypatch):
    create(client, auth_headers)
    # skip the pre-insert lookup so only the unique index can catch the clash
    monkeypatch.setattr("src.api.gpts.router._ensure_unique_name", lambda *args, **kwargs: None)

    response = client.post("/gpts", json=new_gpt(), headers=auth_headers)

    assert response.status_code == 409
    assert response.json()["message"] == "You already have a GPT with this name"
    assert len(client.get("/gpts", headers=auth_headers).json()["data"]["data"]) == 1
