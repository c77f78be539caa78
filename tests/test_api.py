"""Tests for the HTTP endpoints."""

from fastapi.testclient import TestClient
from prometheus_client import REGISTRY
from urlbuilder.core.config import settings
from urlbuilder.main import app

client = TestClient(app)

class TestAPI:

    def test_healthz(self):
        response = client.get("/healthz")
        assert response.status_code == 200
        assert response.json() == {"status": "ok", "env": settings.ENV}

    def test_build_url(self):
        response = client.post(
            "/api/v1/urls",
            json={
                "protocol": "http",
                "host": "localhost",
                "port": 8000,
                "params": {"first": "1", "second": "2"},
            },
        )
        assert response.status_code == 200
        data = response.json()
        assert data["url"] == "http://localhost:8000?first=1&second=2&"
        assert data["params_count"] == 2

    def test_empty_body_builds_default_url(self):
        response = client.post("/api/v1/urls", json={})
        assert response.status_code == 200
        assert response.json() == {"url": "://:0", "params_count": 0}

    def test_port_out_of_range(self):
        response = client.post("/api/v1/urls", json={"port": 70000})
        assert response.status_code == 422

    def test_metrics_count_api_builds(self):
        client.post("/api/v1/urls", json={"host": "h"})
        response = client.get("/metrics/")
        assert response.status_code == 200
        assert 'urls_built_total{source="api"}' in response.text

    def test_params_gauge_tracks_last_build(self):
        client.post("/api/v1/urls", json={"params": {"a": "1", "b": "2", "c": "3"}})
        assert REGISTRY.get_sample_value("url_params") == 3.0
