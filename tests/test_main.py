"""Tests for app wiring: health probes, envelopes, request ids, logging."""

import json
import logging

from gallery_api.schemas.common import ErrorResponse
from gallery_api.utils.logger import JsonLinesFormatter, request_id_var


def test_root(client) -> None:
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["name"] == "Client Gallery API"


def test_health(client) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["store"]["photos"] == 6


def test_liveness_and_readiness(client) -> None:
    assert client.get("/health/liveness").json() == {"status": "alive"}
    assert client.get("/health/readiness").json() == {"status": "ready"}


def test_metrics_endpoint(client) -> None:
    client.get("/api/gallery/share-wedding-smith-2024")

    response = client.get("/metrics")

    assert response.status_code == 200
    assert "gallery_api_gallery_access_total" in response.text


def test_unknown_route_uses_envelope(client) -> None:
    response = client.get("/api/does-not-exist")

    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "Not Found"}


def test_error_envelope_omits_unset_fields() -> None:
    assert ErrorResponse(error="Not Found").to_content() == {"success": False, "error": "Not Found"}
    assert ErrorResponse(error="Internal server error", request_id="rid-9").to_content() == {
        "success": False,
        "error": "Internal server error",
        "requestId": "rid-9",
    }


def test_request_id_is_propagated(client) -> None:
    response = client.get(
        "/api/comments/photo/photo-1", headers={"X-Request-ID": "abc123"}
    )

    assert response.headers["X-Request-ID"] == "abc123"


def test_request_id_is_generated(client) -> None:
    response = client.get("/api/comments/photo/photo-1")

    assert response.headers["X-Request-ID"]


def test_json_formatter_drops_sensitive_fields() -> None:
    record = logging.LogRecord(
        name="gallery_api",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="Login",
        args=(),
        exc_info=None,
    )
    record.event = "auth"
    record.user_id = "user-1"
    record.email = "client@example.com"

    token = request_id_var.set("rid-1")
    try:
        payload = json.loads(JsonLinesFormatter().format(record))
    finally:
        request_id_var.reset(token)

    assert payload["level"] == "INFO"
    assert payload["event"] == "auth"
    assert payload["rid"] == "rid-1"
    assert payload["msg"] == "Login"
    assert payload["ctx"]["user_id"] == "user-1"
    assert "email" not in payload["ctx"]


def test_business_event_is_logged(client, caplog) -> None:
    with caplog.at_level(logging.INFO, logger="gallery_api"):
        client.post(
            "/api/gallery/share-wedding-smith-2024/selections/photo-2",
            json={"status": "selected"},
        )

    records = [r for r in caplog.records if r.getMessage() == "Selection updated"]
    assert records
    assert records[0].event == "selection"
    assert records[0].photo_id == "photo-2"
