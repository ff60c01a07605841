import contextvars
import logging

from app.config import settings
from app.core.middleware import CorrelationIdFilter, set_correlation_id

API = settings.api_prefix


def test_health(client):
    response = client.get(f"{API}/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["version"] == settings.api_version
    assert data["database"]["status"] == "healthy"
    assert data["database"]["database"] == "sqlite"


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["health_check"] == f"{API}/health"


def test_unknown_route(client):
    response = client.get(f"{API}/no-such-endpoint")
    assert response.status_code == 404
    assert response.json() == {"code": "http_404", "message": "Not Found", "data": {"status": 404}}


def test_correlation_id_is_echoed(client):
    response = client.get(f"{API}/health", headers={"X-Correlation-ID": "abc-123"})
    assert response.headers["X-Correlation-ID"] == "abc-123"


def test_correlation_id_is_generated(client):
    response = client.get(f"{API}/health")
    assert response.headers["X-Correlation-ID"]


def test_log_records_carry_correlation_id():
    record = logging.LogRecord("zaryab.test", logging.INFO, __file__, 1, "message", None, None)

    def stamp(correlation_id):
        set_correlation_id(correlation_id)
        CorrelationIdFilter().filter(record)
        return record.correlation_id

    assert contextvars.copy_context().run(stamp, "abc-123") == "abc-123"
    CorrelationIdFilter().filter(record)
    assert record.correlation_id == "-"
