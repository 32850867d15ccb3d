"""Conversions between service-layer mappings and JSON request bodies."""

from __future__ import annotations

from typing import Any

# snake_case attribute -> camelCase JSON key, where they differ
JSON_KEYS = {
    "first_name": "firstName",
    "last_name": "lastName",
    "date_of_birth": "dateOfBirth",
    "zip_code": "zipCode",
}


def to_json_payload(data: dict[str, Any]) -> dict[str, Any]:
    """Rename snake_case keys to the camelCase keys clients send."""

    return {JSON_KEYS.get(key, key): value for key, value in data.items()}
