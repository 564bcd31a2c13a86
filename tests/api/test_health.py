"""
Tests for the health check endpoints.
"""


def test_health_check_returns_200(client):
    """
    The liveness probe answers without touching the ledger.
    If this fails, nothing else will work.
    """
    response = client.get("/api/health")
    assert response.status_code == 200


def test_health_check_returns_static_payload(client):
    data = client.get("/api/health").json()
    assert data == {"status": "OK", "message": "Core Banking API is running"}


def test_readiness_reports_database_status(client):
    """
    The readiness probe runs a query through the session,
    so monitoring can tell a live process from a usable one.
    """
    response = client.get("/api/health/ready")
    assert response.status_code == 200
    assert response.json()["database"] == "healthy"


def test_responses_carry_request_id(client):
    response = client.get("/api/health", headers={"X-Request-ID": "abc-123"})
    assert response.headers["X-Request-ID"] == "abc-123"
