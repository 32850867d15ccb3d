"""Input sanitization applied to every submission before validation."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

_ANGLE_BRACKETS = re.compile(r"[<>]")


def sanitize_text(value: str) -> str:
    """Trim ``value`` and drop every ``<`` and ``>``.

    Whitespace uncovered by the removal is trimmed too, so
    ``sanitize_text(sanitize_text(x)) == sanitize_text(x)``.
    """
    return _ANGLE_BRACKETS.sub("", value.strip()).strip()


def _sanitize_value(value: Any) -> Any:
    if isinstance(value, str):
        return sanitize_text(value)
    if isinstance(value, (list, tuple)):
        return [sanitize_text(item) if isinstance(item, str) else item for item in value]
    return value


def sanitize(data: Mapping[str, Any]) -> dict[str, Any]:
    """Return a sanitized copy of ``data``.

    Strings are cleaned with :func:`sanitize_text`; string elements of lists
    are cleaned the same way while other elements are kept; anything else
    passes through. Keys are never added or removed.
    """
    return {key: _sanitize_value(value) for key, value in data.items()}
