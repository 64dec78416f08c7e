import logging
import uuid

import pytest

pytestmark = pytest.mark.integration


class TestRequestContextMiddleware:
    def test_returns_provided_request_id(self, client):
        custom_id = "my-custom-request-id-123"
        response = client.get("/api/products", HTTP_X_REQUEST_ID=custom_id)
        assert response["X-Request-ID"] == custom_id

    def test_generates_uuid_when_no_request_id(self, client):
        response = client.get("/api/products")
        request_id = response["X-Request-ID"]
        parsed = uuid.UUID(request_id, version=4)
        assert str(parsed) == request_id

    def test_request_id_set_on_not_found(self, api_client_with_correlation):
        api_client, cid = api_client_with_correlation
        response = api_client.get("/api/products/424242")
        assert response.status_code == 404
        assert response["X-Request-ID"] == cid

    def test_correlation_id_in_logs(self, client, caplog):
        custom_id = "log-test-correlation-456"
        with caplog.at_level(logging.INFO):
            client.get("/api/products", HTTP_X_REQUEST_ID=custom_id)
        found = any(custom_id in record.getMessage() for record in caplog.records)
        assert found, (
            f"correlation_id '{custom_id}' not found in log records: "
            f"{[r.getMessage() for r in caplog.records]}"
        )

    def test_finished_log_carries_status_and_duration(self, client, caplog):
        with caplog.at_level(logging.INFO):
            client.get("/api/products/424242")
        finished = [
            r.getMessage() for r in caplog.records if "request_finished" in r.getMessage()
        ]
        assert finished
        assert "404" in finished[-1]
        assert "duration_ms" in finished[-1]
