"""Convenience exports for application schemas."""

from __future__ import annotations

from .user import (
    DeletedUserSchema,
    RegistrationPayloadSchema,
    RegistrationReceiptSchema,
    UserSchema,
    UserSummarySchema,
)

__all__ = [
    "DeletedUserSchema",
    "RegistrationPayloadSchema",
    "RegistrationReceiptSchema",
    "UserSchema",
    "UserSummarySchema",
]
