from unittest.mock import patch

import pytest
from django.db import OperationalError


class TestHealthCheck:
    def test_health_check_returns_200(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "UP"
        assert "timestamp" in data
        assert "services" in data

    def test_health_check_reports_database_status(self, client):
        response = client.get("/health")
        data = response.json()
        assert data["services"]["database"]["status"] == "UP"
        assert "response_time_ms" in data["services"]["database"]

    def test_health_check_returns_503_when_database_down(self, client):
        with patch(
            "modules.core.views.connections",
        ) as mock_connections:
            mock_connections.__getitem__.return_value.ensure_connection.side_effect = (
                OperationalError("database unavailable")
            )
            response = client.get("/health")
        assert response.status_code == 503
        data = response.json()
        assert data["status"] == "DOWN"
        assert data["services"]["database"] == {"status": "DOWN"}
