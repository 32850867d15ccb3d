"""
DTOs for the registration pipeline.

Contracts shared by the sanitizer, the field validators, the registration
service and the record store. None of them depend on Flask or marshmallow.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from datetime import datetime
from typing import Any, Final


class _Missing:
    """Sentinel type marking a field the submitter did not send."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "<missing>"


MISSING: Final = _Missing()


def is_present(value: Any) -> bool:
    """Return ``True`` when ``value`` was sent and is not JSON ``null``."""
    return value is not MISSING and value is not None


# --------------------------------------------------------------------------- #
# Input
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class RegistrationIn:
    """
    Decoded registration submission with per-field presence.

    Every attribute keeps the raw (already sanitized) value exactly as sent,
    or :data:`MISSING` when the key was absent. Types are *not* enforced
    here: the field validators report wrong types as ordinary messages.

    :param first_name: Given name.
    :param last_name: Family name.
    :param email: Contact email, unique among stored records.
    :param phone: Phone number in any punctuation.
    :param date_of_birth: Calendar date, ISO 8601.
    :param street: Street address.
    :param city: City.
    :param state: State or province.
    :param zip_code: Six-digit PIN code.
    :param gender: One of :data:`~signup.services.registration.validators.GENDERS`.
    :param experience: One of :data:`~signup.services.registration.validators.EXPERIENCE_LEVELS`.
    :param interests: Optional list of interest tags.
    :param terms: Terms and conditions acceptance.
    :param bio: Optional free text.
    :param newsletter: Optional newsletter opt-in, stored as sent.
    """

    first_name: Any = MISSING
    last_name: Any = MISSING
    email: Any = MISSING
    phone: Any = MISSING
    date_of_birth: Any = MISSING
    street: Any = MISSING
    city: Any = MISSING
    state: Any = MISSING
    zip_code: Any = MISSING
    gender: Any = MISSING
    experience: Any = MISSING
    interests: Any = MISSING
    terms: Any = MISSING
    bio: Any = MISSING
    newsletter: Any = MISSING

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> RegistrationIn:
        """Build the DTO from a snake_case mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in known})

    def present_fields(self) -> dict[str, Any]:
        """Return the submitted fields as a mapping, omitting absent ones."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not MISSING
        }


@dataclass(frozen=True, slots=True)
class RequestMeta:
    """
    Request-scoped metadata attached to an accepted registration.

    :param ip_address: Originating network address.
    :type ip_address: str | None
    :param user_agent: Client ``User-Agent`` header.
    :type user_agent: str | None
    """

    ip_address: str | None = None
    user_agent: str | None = None


# --------------------------------------------------------------------------- #
# Validation results
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """
    Outcome of a single field check.

    :param valid: Whether the field passed.
    :type valid: bool
    :param message: Human-readable reason, present iff ``valid`` is ``False``.
    :type message: str | None
    """

    valid: bool
    message: str | None = None

    @classmethod
    def ok(cls) -> ValidationResult:
        return cls(valid=True)

    @classmethod
    def fail(cls, message: str) -> ValidationResult:
        return cls(valid=False, message=message)


@dataclass(frozen=True, slots=True)
class AggregateValidationResult:
    """
    Every failure of one submission, in field-check order.

    :param errors: Failure messages; empty iff the submission is valid.
    :type errors: tuple[str, ...]
    """

    errors: tuple[str, ...] = ()

    @property
    def valid(self) -> bool:
        return not self.errors


# --------------------------------------------------------------------------- #
# Stored entity
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class UserRecord:
    """
    An accepted registration.

    ``id`` is ``None`` only on drafts that have not been inserted yet; the
    store assigns the identifier on insertion. All input attributes hold
    sanitized values; ``interests`` is frozen into a tuple.

    :param registered_at: Server time of acceptance (timezone-aware UTC).
    :param ip_address: Originating network address.
    :param user_agent: Client ``User-Agent`` header.
    """

    first_name: str
    last_name: str
    email: str
    phone: str
    date_of_birth: str
    street: str
    city: str
    state: str
    zip_code: str
    gender: str
    experience: str
    terms: Any
    registered_at: datetime
    interests: tuple[str, ...] | None = None
    bio: str | None = None
    newsletter: Any = None
    ip_address: str | None = None
    user_agent: str | None = None
    id: int | None = field(default=None)
