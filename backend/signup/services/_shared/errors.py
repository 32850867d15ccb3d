"""
Domain-level exceptions used within the service layer.

These exceptions are **framework-agnostic** and should never import or depend
on Flask or HTTP. They serve as stable contracts between the repository,
the registration pipeline and application services.

The translation to HTTP responses (RFC 7807) is handled by
``signup/core/errors.py`` via ``BaseService.translate_exceptions()``.
"""

from __future__ import annotations

from dataclasses import dataclass

from signup.services.registration.dto import AggregateValidationResult

# --------------------------------------------------------------------------- #
# Base types
# --------------------------------------------------------------------------- #


class ServiceError(Exception):
    """
    Base class for all service-level errors.

    Notes
    -----
    - These are *not* HTTP errors.
    - The API layer translates them through ``BaseService``.
    """

    pass


# --------------------------------------------------------------------------- #
# Specific domain-level errors
# --------------------------------------------------------------------------- #


@dataclass(slots=True)
class NotFoundError(ServiceError):
    """
    Raised when an entity is not found in the repository.

    :param entity: Entity name (e.g., "User").
    :type entity: str
    :param key: Identifier or search key.
    :type key: str | int
    """

    entity: str
    key: str | int

    def __str__(self) -> str:
        return f"{self.entity} not found: {self.key}"


@dataclass(slots=True)
class RegistrationRejectedError(ServiceError):
    """
    Raised when a submission fails one or more field checks.

    Duplicate emails are reported here as an ordinary message.

    :param result: Aggregate of every failure, in field-check order.
    :type result: AggregateValidationResult
    """

    result: AggregateValidationResult

    @property
    def errors(self) -> list[str]:
        return list(self.result.errors)

    def __str__(self) -> str:
        return "Validation failed"
