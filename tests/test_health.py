from datetime import datetime

ORIGIN = "http://localhost:5173"


def test_root(client):
    res = client.get("/")
    assert res.status_code == 200
    assert res.json() == {
        "status": "ok",
        "message": "Grok API Proxy Server is running",
        "endpoints": {"chat": "POST /api/chat", "health": "GET /health"},
    }


def test_health(client):
    res = client.get("/health")
    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "healthy"
    assert body["cors"] == "enabled"
    # ISO-8601 UTC, e.g. 2026-10-18T12:00:00.000Z
    assert body["timestamp"].endswith("Z")
    parsed = datetime.fromisoformat(body["timestamp"].replace("Z", "+00:00"))
    assert parsed.utcoffset().total_seconds() == 0


def test_health_has_cors_headers(client):
    res = client.get("/health", headers={"Origin": ORIGIN})
    assert res.status_code == 200
    assert res.headers["access-control-allow-origin"] == "*"
