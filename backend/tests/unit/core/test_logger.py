"""Unit tests for the logging utility."""

from __future__ import annotations

import json
import logging

from signup.core.logger import JSONFormatter, configure_logging


def test_configure_logging_sets_level() -> None:
    """``configure_logging`` should set the root logger level."""

    # Act
    configure_logging("DEBUG")

    # Assert
    assert logging.getLogger().level == logging.DEBUG


def test_json_formatter_includes_whitelisted_extras() -> None:
    record = logging.LogRecord(
        "signup.test", logging.INFO, __file__, 1, "registration.accepted", (), None
    )
    record.user_id = 7
    record.request_id = "req-1"
    record.password = "hunter2"
    record.total_users = 3

    payload = json.loads(JSONFormatter().format(record))

    assert payload["message"] == "registration.accepted"
    assert payload["level"] == "INFO"
    assert payload["user_id"] == 7
    assert payload["request_id"] == "req-1"
    assert "password" not in payload
    assert "total_users" not in payload


def test_request_id_header_is_echoed(client) -> None:
    response = client.get("/api/v1/health", headers={"X-Request-ID": "abc-123"})
    assert response.headers["X-Request-ID"] == "abc-123"


def test_request_id_is_generated(client) -> None:
    response = client.get("/api/v1/health")
    assert response.headers["X-Request-ID"]
