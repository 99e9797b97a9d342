from swadesh.core.flags import get_flags


def test_login_redirects_home(client):
    resp = client.get("/api/login", follow_redirects=False)
    assert resp.status_code == 302
    assert resp.headers["location"] == "/"


def test_current_user(signed_in):
    user = signed_in.get("/api/auth/user").json()
    assert user["id"] == "dev-user-001"
    assert user["firstName"] == "Dev"
    assert user["setupCompleted"] is False


def test_profile_counts_memories(signed_in):
    signed_in.post("/api/memories", json={"content": "a"})
    signed_in.post("/api/memories", json={"content": "b"})
    profile = signed_in.get("/api/auth/profile").json()
    assert profile["memoriesCount"] == 2
    assert profile["user"]["email"] == "dev@swadesh.ai"


def test_setup(signed_in):
    assert signed_in.post("/api/user/setup").json() == {"success": True}
    assert signed_in.get("/api/auth/user").json()["setupCompleted"] is True


def test_logout_json(signed_in):
    assert signed_in.get("/api/auth/logout").json() == {"success": True}
    assert signed_in.get("/api/auth/user").status_code == 401


def test_logout_redirect(signed_in):
    resp = signed_in.get("/api/logout", follow_redirects=False)
    assert resp.status_code == 302
    assert signed_in.get("/api/auth/user").status_code == 401


def test_anonymous_profile(client):
    assert client.get("/api/auth/user").status_code == 401
    assert client.post("/api/user/setup").status_code == 401


def test_dev_login_disabled(app_env, fake_llm, monkeypatch):
    from fastapi.testclient import TestClient
    from swadesh.factory import create_app

    monkeypatch.setenv("FF_ENABLE_DEV_LOGIN", "false")
    get_flags.cache_clear()
    with TestClient(create_app()) as client:
        assert client.get("/api/login", follow_redirects=False).status_code == 404


def test_login_without_database(no_db_client):
    resp = no_db_client.get("/api/login", follow_redirects=False)
    assert resp.status_code == 500
    assert "DATABASE_URL" in resp.json()["error"]


def test_dev_login_off_in_production_by_default(app_env, fake_llm, monkeypatch):
    from fastapi.testclient import TestClient
    from swadesh.core.config import get_settings
    from swadesh.factory import create_app

    monkeypatch.setenv("ENV", "production")
    monkeypatch.delenv("FF_ENABLE_DEV_LOGIN", raising=False)
    get_settings.cache_clear()
    get_flags.cache_clear()
    with TestClient(create_app()) as client:
        assert client.get("/api/login", follow_redirects=False).status_code == 404


def test_settings_defaults_filled(client):
    resp = client.post("/api/user/settings", json={"theme": "light", "ttsSpeed": 1.5})
    assert resp.status_code == 200
    body = resp.json()
    assert body["theme"] == "light"
    assert body["ttsSpeed"] == 1.5
    assert body["personality"] == "friendly"
    assert body["musicVolume"] == 0.5


def test_settings_out_of_bounds(client):
    resp = client.post("/api/user/settings", json={"ttsSpeed": 3})
    assert resp.status_code == 400
    assert "ttsSpeed" in resp.json()["error"]
