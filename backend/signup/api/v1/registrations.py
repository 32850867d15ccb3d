"""Registration endpoint."""

from __future__ import annotations

from flask import Blueprint

from signup.api.deps import json_body, json_response, request_meta, service_kwargs, timing
from signup.schemas import RegistrationPayloadSchema, RegistrationReceiptSchema
from signup.services._shared.errors import ServiceError
from signup.services.registration.service import RegistrationService

bp = Blueprint("registrations", __name__)

payload_schema = RegistrationPayloadSchema()
receipt_schema = RegistrationReceiptSchema()


@bp.post("/register")
@timing
def register():
    """Validate a submission and store it when every field passes."""

    payload = payload_schema.load(json_body())
    service = RegistrationService(**service_kwargs())
    try:
        record = service.register(payload, request_meta())
    except ServiceError as exc:
        raise service.translate_exceptions(exc) from exc
    return json_response({"data": receipt_schema.dump(record)}, status=201)
