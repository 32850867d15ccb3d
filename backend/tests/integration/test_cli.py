"""Tests for ``flask registrations check``."""

from __future__ import annotations

import json

from tests.factories import RegistrationDataFactory
from tests.helpers.payloads import to_json_payload


def _write(tmp_path, payload) -> str:
    path = tmp_path / "payload.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return str(path)


def test_check_valid_payload(app, store, tmp_path) -> None:
    path = _write(tmp_path, to_json_payload(RegistrationDataFactory()))

    result = app.test_cli_runner().invoke(args=["registrations", "check", path])

    assert result.exit_code == 0
    assert "Payload is valid." in result.output
    assert store.count() == 0


def test_check_invalid_payload(app, tmp_path) -> None:
    payload = to_json_payload(RegistrationDataFactory(gender="robot", zip_code="012345"))
    path = _write(tmp_path, payload)

    result = app.test_cli_runner().invoke(args=["registrations", "check", path])

    assert result.exit_code == 1
    assert "Payload rejected (2 problem(s)):" in result.output
    assert "  - PIN code must be a valid 6-digit number." in result.output
    assert "  - Please select a valid gender option." in result.output


def test_check_rejects_non_object(app, tmp_path) -> None:
    path = _write(tmp_path, [1, 2, 3])

    result = app.test_cli_runner().invoke(args=["registrations", "check", path])

    assert result.exit_code == 2
    assert "not a JSON object" in result.output
