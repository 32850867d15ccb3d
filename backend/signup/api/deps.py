"""Shared API helpers for request parsing and cross-cutting concerns."""

from __future__ import annotations

import functools
import time
from collections.abc import Callable
from typing import Any, TypeVar

from flask import Response, current_app, jsonify, request

from signup.core.errors import BadRequest
from signup.core.extensions import get_store
from signup.core.logger import ensure_request_id
from signup.services._shared.base import ServiceContext
from signup.services.registration.dto import RequestMeta

F = TypeVar("F", bound=Callable[..., Any])


def service_context() -> ServiceContext:
    """Build the request-scoped context handed to services."""

    return ServiceContext(request_id=ensure_request_id())


def service_kwargs() -> dict[str, Any]:
    """Keyword arguments shared by every service constructor."""

    return {"store": get_store(), "ctx": service_context()}


def request_meta() -> RequestMeta:
    """Capture the originating address and user agent of the current request."""

    return RequestMeta(
        ip_address=request.remote_addr,
        user_agent=request.headers.get("User-Agent"),
    )


def json_body() -> dict[str, Any]:
    """Return the request JSON object or raise :class:`BadRequest`."""

    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        raise BadRequest("Request body must be a JSON object")
    return body


def json_response(payload: Any, *, status: int = 200) -> Response:
    """Return a JSON response enforcing a consistent MIME type."""

    response = jsonify(payload)
    response.status_code = status
    return response


def timing(func: F) -> F:
    """Decorator capturing handler execution time in milliseconds."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            request_endpoint = getattr(request, "endpoint", None)
            current_app.logger.debug(
                "request.elapsed",
                extra={"endpoint": request_endpoint, "elapsed_ms": round(elapsed_ms, 2)},
            )

    return wrapper  # type: ignore[return-value]
