"""Problem+JSON behaviour of the error layer."""

from __future__ import annotations

import pytest
from signup.core.config import TestingConfig
from signup.factory import create_app
from tests.helpers.assertions import assert_problem


class ExposingConfig(TestingConfig):
    EXPOSE_ERROR_DETAILS = True


def _boom():
    raise RuntimeError("database password is hunter2")


@pytest.fixture()
def failing_app(store):
    app = create_app(TestingConfig, store=store)
    app.add_url_rule("/api/v1/boom", "boom", _boom)
    return app


def test_unknown_route(client) -> None:
    body = assert_problem(client.get("/api/v1/nope"), 404, "not_found")
    assert body["instance"] == "/api/v1/nope"


def test_method_not_allowed(client) -> None:
    assert_problem(client.put("/api/v1/register", json={}), 405, "method_not_allowed")


def test_unexpected_error_hides_internals(failing_app) -> None:
    response = failing_app.test_client().get("/api/v1/boom")

    body = assert_problem(response, 500, "internal_server_error")
    assert body["detail"] == "Unexpected error"
    assert "hunter2" not in response.get_data(as_text=True)


def test_unexpected_error_details_when_exposed(store) -> None:
    app = create_app(ExposingConfig, store=store)
    app.add_url_rule("/api/v1/boom", "boom", _boom)

    body = assert_problem(app.test_client().get("/api/v1/boom"), 500, "internal_server_error")

    assert body["details"] == {"error": "database password is hunter2"}


def test_problem_carries_request_id(client) -> None:
    response = client.get("/api/v1/users/5", headers={"X-Request-ID": "trace-me"})
    body = assert_problem(response, 404, "not_found")
    assert body["request_id"] == "trace-me"


def test_default_environment_hides_internals(monkeypatch, store) -> None:
    monkeypatch.delenv("APP_ENV", raising=False)
    monkeypatch.delenv("EXPOSE_ERROR_DETAILS", raising=False)

    def _leak():
        raise RuntimeError("secret internal path /srv/db.sqlite")

    app = create_app(store=store)
    app.add_url_rule("/api/v1/leak", "leak", _leak)
    response = app.test_client().get("/api/v1/leak")

    body = assert_problem(response, 500, "internal_server_error")
    assert "details" not in body
    assert "/srv/db.sqlite" not in response.get_data(as_text=True)
