"""End-to-end tests for the ``/api/v1/users`` resource."""

from __future__ import annotations

import pytest
from tests.factories import RegistrationDataFactory
from tests.helpers.assertions import assert_problem
from tests.helpers.payloads import to_json_payload

SUMMARY_KEYS = {
    "id",
    "firstName",
    "lastName",
    "email",
    "city",
    "state",
    "experience",
    "interests",
    "registrationDate",
}
FULL_KEYS = SUMMARY_KEYS | {
    "phone",
    "dateOfBirth",
    "street",
    "zipCode",
    "gender",
    "bio",
    "newsletter",
}


@pytest.fixture()
def registered(client) -> list[dict]:
    payloads = [to_json_payload(RegistrationDataFactory()) for _ in range(3)]
    for payload in payloads:
        assert client.post("/api/v1/register", json=payload).status_code == 201
    return payloads


def test_list_empty(client) -> None:
    response = client.get("/api/v1/users")

    assert response.status_code == 200
    assert response.get_json() == {"data": [], "meta": {"total": 0}}


def test_list_returns_public_projection(client, registered) -> None:
    body = client.get("/api/v1/users").get_json()

    assert body["meta"] == {"total": 3}
    assert [u["id"] for u in body["data"]] == [1, 2, 3]
    for user in body["data"]:
        assert set(user) == SUMMARY_KEYS
    assert body["data"][0]["email"] == registered[0]["email"]


def test_get_user_returns_full_record(client, registered) -> None:
    response = client.get("/api/v1/users/2")

    assert response.status_code == 200
    user = response.get_json()["data"]
    assert set(user) == FULL_KEYS
    expected = registered[1]
    for key in ("firstName", "lastName", "email", "phone", "dateOfBirth", "zipCode", "gender"):
        assert user[key] == expected[key]
    assert user["interests"] == ["technology", "music"]
    assert "ipAddress" not in user and "userAgent" not in user


def test_get_unknown_user(client, registered) -> None:
    body = assert_problem(client.get("/api/v1/users/42"), 404, "not_found")
    assert body["detail"] == "User not found"


def test_delete_user(client, store, registered) -> None:
    response = client.delete("/api/v1/users/2")

    assert response.status_code == 200
    assert response.get_json()["data"] == {
        "id": 2,
        "firstName": registered[1]["firstName"],
        "lastName": registered[1]["lastName"],
        "email": registered[1]["email"],
    }
    assert [u["id"] for u in client.get("/api/v1/users").get_json()["data"]] == [1, 3]
    assert store.count() == 2


def test_delete_twice_is_not_found(client, registered) -> None:
    assert client.delete("/api/v1/users/1").status_code == 200
    assert_problem(client.delete("/api/v1/users/1"), 404, "not_found")


def test_delete_unknown_leaves_store_unchanged(client, store, registered) -> None:
    assert_problem(client.delete("/api/v1/users/99"), 404, "not_found")
    assert store.count() == 3


def test_non_numeric_id_is_unknown_route(client) -> None:
    body = assert_problem(client.get("/api/v1/users/abc"), 404, "not_found")
    assert body["detail"] == "Route '/api/v1/users/abc' not found"
