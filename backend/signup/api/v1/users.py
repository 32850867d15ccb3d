"""User endpoints."""

from __future__ import annotations

from flask import Blueprint

from signup.api.deps import json_response, service_kwargs, timing
from signup.schemas import DeletedUserSchema, UserSchema, UserSummarySchema
from signup.services._shared.errors import ServiceError
from signup.services.users import UserService

bp = Blueprint("users", __name__)

user_schema = UserSchema()
user_list_schema = UserSummarySchema(many=True)
deleted_user_schema = DeletedUserSchema()


@bp.get("")
@timing
def list_users():
    """Return every stored user in registration order."""

    service = UserService(**service_kwargs())
    data = user_list_schema.dump(service.list_users())
    return json_response({"data": data, "meta": {"total": len(data)}})


@bp.get("/<int:user_id>")
@timing
def get_user(user_id: int):
    """Return the full stored registration."""

    service = UserService(**service_kwargs())
    try:
        user = service.get_user(user_id)
    except ServiceError as exc:
        raise service.translate_exceptions(exc) from exc
    return json_response({"data": user_schema.dump(user)})


@bp.delete("/<int:user_id>")
@timing
def delete_user(user_id: int):
    """Delete a registration; its email becomes available again."""

    service = UserService(**service_kwargs())
    try:
        user = service.delete_user(user_id)
    except ServiceError as exc:
        raise service.translate_exceptions(exc) from exc
    return json_response({"data": deleted_user_schema.dump(user)})
