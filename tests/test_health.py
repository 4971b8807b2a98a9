def test_health(client) -> None:
    r = client.get("/health/")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


def test_health_db(client) -> None:
    r = client.get("/health/db")
    assert r.status_code == 200
    assert r.json()["orm"] == "ok"
