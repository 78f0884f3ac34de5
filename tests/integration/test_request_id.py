import logging
import uuid

import pytest

pytestmark = pytest.mark.integration


def _events(caplog, name):
    """structlog event dicts with the given event name captured by caplog."""
    return [
        record.msg
        for record in caplog.records
        if isinstance(record.msg, dict) and record.msg.get("event") == name
    ]


class TestRequestContextMiddleware:
    def test_echoes_incoming_request_id(self, client):
        response = client.get("/health", HTTP_X_REQUEST_ID="checkout-retry-7f3a")
        assert response["X-Request-ID"] == "checkout-retry-7f3a"

    def test_generates_request_id_when_missing(self, client):
        first = client.get("/health")["X-Request-ID"]
        second = client.get("/health")["X-Request-ID"]

        assert str(uuid.UUID(first, version=4)) == first
        assert first != second

    def test_header_on_api_responses(self, request_id_client):
        api_client, request_id = request_id_client
        response = api_client.get("/api/v1/restaurants/")
        assert response["X-Request-ID"] == request_id

    def test_request_id_bound_on_log_events(self, client, caplog):
        with caplog.at_level(logging.INFO):
            client.get("/health", HTTP_X_REQUEST_ID="log-bound-id")

        started = _events(caplog, "http.request_started")
        assert started
        assert started[-1]["request_id"] == "log-bound-id"
        assert started[-1]["path"] == "/health"

    def test_finish_event_carries_status_and_duration(self, client, caplog):
        with caplog.at_level(logging.INFO):
            client.get("/health", HTTP_X_REQUEST_ID="timed-request")

        finished = _events(caplog, "http.request_finished")
        assert finished
        event = finished[-1]
        assert event["request_id"] == "timed-request"
        assert event["status_code"] == 200
        assert isinstance(event["duration_ms"], float)
        assert event["duration_ms"] >= 0

    def test_not_found_status_logged(self, api_client, caplog):
        with caplog.at_level(logging.INFO):
            api_client.get(f"/api/v1/restaurants/{uuid.uuid4()}/")

        finished = _events(caplog, "http.request_finished")
        assert finished[-1]["status_code"] == 404
