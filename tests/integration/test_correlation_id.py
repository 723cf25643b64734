import logging
import uuid

import pytest

pytestmark = pytest.mark.integration


class TestCorrelationIdMiddleware:
    def test_returns_provided_request_id(self, client):
        custom_id = "my-custom-request-id-123"
        response = client.get("/health", HTTP_X_REQUEST_ID=custom_id)
        assert response["X-Request-ID"] == custom_id

    def test_generates_uuid_when_no_request_id(self, client):
        response = client.get("/product")
        request_id = response["X-Request-ID"]
        parsed = uuid.UUID(request_id, version=4)
        assert str(parsed) == request_id

    def test_header_present_on_error_responses(self, api_client_with_correlation):
        api_client, cid = api_client_with_correlation
        response = api_client.get("/product/unknown-id")
        assert response.status_code == 404
        assert response["X-Request-ID"] == cid

    def test_correlation_id_in_service_logs(self, client, caplog):
        custom_id = "log-test-correlation-456"
        with caplog.at_level(logging.INFO):
            client.post(
                "/product",
                data={"name": "Logged"},
                content_type="application/json",
                HTTP_X_REQUEST_ID=custom_id,
            )
        messages = [record.getMessage() for record in caplog.records]
        assert any(
            "product.created" in message and custom_id in message
            for message in messages
        ), f"correlation_id '{custom_id}' not found in log records: {messages}"

    def test_request_finished_logs_duration(self, client, caplog):
        with caplog.at_level(logging.INFO):
            client.get("/health")
        finished = [
            record.getMessage()
            for record in caplog.records
            if "request_finished" in record.getMessage()
        ]
        assert finished
        assert "duration_ms" in finished[0]
