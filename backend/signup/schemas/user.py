"""Registration and user resource schemas.

JSON keys are camelCase on the wire and snake_case inside the service layer.
"""

from __future__ import annotations

from marshmallow import EXCLUDE, Schema, fields


class RegistrationPayloadSchema(Schema):
    """Decode a registration submission without enforcing field types.

    Values are loaded raw so the registration validators can report wrong
    types alongside every other problem. Keys the form does not define are
    dropped; absent keys stay absent.
    """

    class Meta:
        unknown = EXCLUDE

    first_name = fields.Raw(data_key="firstName", allow_none=True)
    last_name = fields.Raw(data_key="lastName", allow_none=True)
    email = fields.Raw(allow_none=True)
    phone = fields.Raw(allow_none=True)
    date_of_birth = fields.Raw(data_key="dateOfBirth", allow_none=True)
    street = fields.Raw(allow_none=True)
    city = fields.Raw(allow_none=True)
    state = fields.Raw(allow_none=True)
    zip_code = fields.Raw(data_key="zipCode", allow_none=True)
    gender = fields.Raw(allow_none=True)
    experience = fields.Raw(allow_none=True)
    interests = fields.Raw(allow_none=True)
    terms = fields.Raw(allow_none=True)
    bio = fields.Raw(allow_none=True)
    newsletter = fields.Raw(allow_none=True)


class RegistrationReceiptSchema(Schema):
    """Echo returned after a successful registration."""

    id = fields.Integer(required=True)
    first_name = fields.String(data_key="firstName")
    last_name = fields.String(data_key="lastName")
    email = fields.String()
    registered_at = fields.DateTime(data_key="registrationDate")


class UserSummarySchema(Schema):
    """Public projection used by the listing (no contact or address detail)."""

    id = fields.Integer(required=True)
    first_name = fields.String(data_key="firstName")
    last_name = fields.String(data_key="lastName")
    email = fields.String()
    city = fields.String()
    state = fields.String()
    experience = fields.String()
    interests = fields.List(fields.String(), allow_none=True)
    registered_at = fields.DateTime(data_key="registrationDate")


class UserSchema(UserSummarySchema):
    """Full representation of a stored registration."""

    phone = fields.String()
    date_of_birth = fields.String(data_key="dateOfBirth")
    street = fields.String()
    zip_code = fields.String(data_key="zipCode")
    gender = fields.String()
    bio = fields.String(allow_none=True)
    newsletter = fields.Raw(allow_none=True)


class DeletedUserSchema(Schema):
    """Identity echo returned after a deletion."""

    id = fields.Integer(required=True)
    first_name = fields.String(data_key="firstName")
    last_name = fields.String(data_key="lastName")
    email = fields.String()
