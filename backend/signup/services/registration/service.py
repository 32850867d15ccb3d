"""
RegistrationService
===================

Process-level service that accepts a new registration:

- Sanitizes the raw submission (pure).
- Runs every field check against the current store snapshot and collects
  all failures (pure, never short-circuits).
- On success allocates an identifier and stores the record; this is the
  only side effect of the pipeline.

Validation and insertion run under the repository lock so the email
uniqueness check and the insert form one atomic step.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from datetime import datetime, timezone
from typing import Any

from signup.repositories.user import UserRepository
from signup.services._shared.base import BaseService, ServiceContext
from signup.services._shared.errors import RegistrationRejectedError
from signup.services.registration.dto import (
    AggregateValidationResult,
    RegistrationIn,
    RequestMeta,
    UserRecord,
    is_present,
)
from signup.services.registration.sanitizer import sanitize
from signup.services.registration.validators import ValidationContext, validate_all

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class RegistrationService(BaseService):
    """
    Orchestrates sanitize → validate → store for one submission.
    """

    def __init__(
        self,
        store: UserRepository,
        *,
        ctx: ServiceContext | None = None,
        clock: Clock = utcnow,
    ) -> None:
        super().__init__(store, ctx=ctx)
        self.clock = clock

    def validate(
        self, payload: Mapping[str, Any], *, now: datetime | None = None
    ) -> tuple[RegistrationIn, AggregateValidationResult]:
        """
        Sanitize and validate ``payload`` without touching the store.

        :param payload: Snake_case field mapping as decoded at the boundary.
        :type payload: Mapping[str, Any]
        :param now: Evaluation time; defaults to the service clock.
        :type now: datetime | None
        :returns: The sanitized DTO and the aggregate result.
        :rtype: tuple[RegistrationIn, AggregateValidationResult]
        """
        dto = RegistrationIn.from_mapping(sanitize(payload))
        ctx = ValidationContext(
            today=(now or self.clock()).date(),
            is_taken=self.store.email_exists,
        )
        return dto, validate_all(dto, ctx)

    def register(self, payload: Mapping[str, Any], meta: RequestMeta | None = None) -> UserRecord:
        """
        Register a submission.

        :param payload: Snake_case field mapping as decoded at the boundary.
        :type payload: Mapping[str, Any]
        :param meta: Originating address and user agent.
        :type meta: RequestMeta | None
        :returns: The stored record, carrying its new identifier.
        :rtype: UserRecord
        :raises RegistrationRejectedError: When any field check fails; the
            store is left untouched.
        """
        meta = meta or RequestMeta()
        with self.store.locked():
            now = self.clock()
            dto, result = self.validate(payload, now=now)
            if not result.valid:
                logger.info(
                    "registration.rejected",
                    extra={"error_count": len(result.errors)},
                )
                raise RegistrationRejectedError(result)
            record = self.store.insert(self._to_record(dto, meta, now))

        logger.info("registration.accepted", extra={"user_id": record.id})
        return record

    # ------------------------------------------------------------------ #
    # Mapping
    # ------------------------------------------------------------------ #

    def _to_record(self, dto: RegistrationIn, meta: RequestMeta, now: datetime) -> UserRecord:
        """
        Build a draft :class:`UserRecord` from a validated DTO.

        Optional fields that were not sent are stored as ``None``.
        """
        interests = tuple(dto.interests) if is_present(dto.interests) else None
        return UserRecord(
            first_name=dto.first_name,
            last_name=dto.last_name,
            email=dto.email,
            phone=dto.phone,
            date_of_birth=dto.date_of_birth,
            street=dto.street,
            city=dto.city,
            state=dto.state,
            zip_code=dto.zip_code,
            gender=dto.gender,
            experience=dto.experience,
            terms=dto.terms,
            interests=interests,
            bio=dto.bio if is_present(dto.bio) else None,
            newsletter=dto.newsletter if is_present(dto.newsletter) else None,
            registered_at=now,
            ip_address=meta.ip_address,
            user_agent=meta.user_agent,
        )
