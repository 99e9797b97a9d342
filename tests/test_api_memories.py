from swadesh.core.dependencies import require_user
from swadesh.core.session import Authenticated


def _create(client, content="I live in Delhi", **extra):
    resp = client.post("/api/memories", json={"content": content, **extra})
    assert resp.status_code == 200, resp.text
    return resp.json()


def test_memories_require_sign_in(client):
    assert client.get("/api/memories").status_code == 401
    resp = client.post("/api/memories", json={"content": "x"})
    assert resp.status_code == 401
    assert resp.json() == {"error": "Unauthorized"}


def test_guest_cannot_use_memories(signed_in):
    resp = signed_in.get("/api/memories", headers={"X-Guest-Mode": "true"})
    assert resp.status_code == 401


def test_create_and_list(signed_in):
    memory = _create(signed_in, category="personal", isPinned=True)
    assert memory["content"] == "I live in Delhi"
    assert memory["category"] == "personal"
    assert memory["isPinned"] is True
    assert memory["userId"] == "dev-user-001"

    listed = signed_in.get("/api/memories").json()
    assert [m["id"] for m in listed] == [memory["id"]]


def test_create_validation(signed_in):
    resp = signed_in.post("/api/memories", json={"content": ""})
    assert resp.status_code == 400
    assert "content" in resp.json()["error"]

    resp = signed_in.post("/api/memories", json={"content": "x", "category": "gossip"})
    assert resp.status_code == 400


def test_update(signed_in):
    memory = _create(signed_in)
    resp = signed_in.patch(f"/api/memories/{memory['id']}", json={"content": "I live in Mumbai"})
    assert resp.status_code == 200
    assert resp.json()["content"] == "I live in Mumbai"
    assert resp.json()["category"] == "general"


def test_update_needs_a_field(signed_in):
    memory = _create(signed_in)
    assert signed_in.patch(f"/api/memories/{memory['id']}", json={}).status_code == 400


def test_update_missing(signed_in):
    resp = signed_in.patch("/api/memories/does-not-exist", json={"content": "x"})
    assert resp.status_code == 404
    assert resp.json() == {"error": "Memory not found"}


def test_delete(signed_in):
    memory = _create(signed_in)
    resp = signed_in.delete(f"/api/memories/{memory['id']}")
    assert resp.json() == {"success": True}
    assert signed_in.get("/api/memories").json() == []
    assert signed_in.delete(f"/api/memories/{memory['id']}").status_code == 404


def test_other_users_memory_looks_missing(signed_in):
    memory = _create(signed_in, "private")
    app = signed_in.app

    app.dependency_overrides[require_user] = lambda: Authenticated("someone-else")
    try:
        assert signed_in.get("/api/memories").json() == []
        patch = signed_in.patch(f"/api/memories/{memory['id']}", json={"content": "mine now"})
        assert patch.status_code == 404
        delete = signed_in.delete(f"/api/memories/{memory['id']}")
        assert delete.status_code == 404
        assert delete.json() == {"error": "Memory not found"}
    finally:
        app.dependency_overrides.clear()

    listed = signed_in.get("/api/memories").json()
    assert [(m["id"], m["content"]) for m in listed] == [(memory["id"], "private")]


def test_memories_without_database(no_db_client):
    assert no_db_client.get("/api/memories").status_code == 401


def test_unreachable_database_is_not_a_sign_out(signed_in, monkeypatch):
    from swadesh.core import dependencies
    from swadesh.core.errors import StorageUnavailable

    async def broken_get_user(db, user_id):
        raise StorageUnavailable()

    monkeypatch.setattr(dependencies, "get_user", broken_get_user)
    resp = signed_in.get("/api/memories")
    assert resp.status_code == 500
    assert resp.json() == {"error": "Storage is unavailable"}
    assert signed_in.get("/api/auth/profile").status_code == 500
