def test_health(client):
    body = client.get("/api/health").json()
    assert body["status"] == "ok"
    assert body["app"] == "Swadesh AI"
    assert body["db"] is True
    assert body["ai"] is True
    assert isinstance(body["uptime"], int)
    assert "timestamp" in body


def test_health_without_database(no_db_client):
    assert no_db_client.get("/api/health").json()["db"] is False
