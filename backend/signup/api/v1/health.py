"""Health check endpoint."""

from __future__ import annotations

from datetime import datetime, timezone

from flask import Blueprint, current_app

from signup.api.deps import json_response, service_kwargs, timing
from signup.services.users import UserService

bp = Blueprint("health", __name__)


@bp.get("/health")
@timing
def healthcheck():
    """Return application health and the number of stored registrations."""

    total = UserService(**service_kwargs()).count()
    payload = {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "totalUsers": total,
        "version": current_app.config.get("APP_VERSION", "dev"),
        "commit": current_app.config.get("APP_COMMIT", "unknown"),
    }
    return json_response(payload)
