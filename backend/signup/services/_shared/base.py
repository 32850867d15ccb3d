from __future__ import annotations

from dataclasses import dataclass

from signup.core import errors as api_errors
from signup.repositories.user import UserRepository
from signup.services._shared.errors import (
    NotFoundError,
    RegistrationRejectedError,
)


@dataclass(slots=True)
class ServiceContext:
    """
    Carry cross-cutting request-scoped data.

    :param request_id: Correlation id for logging/tracing.
    """

    request_id: str | None = None


class BaseService:
    """
    Base class for application services.

    Responsibilities
    ----------------
    * Hold the injected :class:`UserRepository` (no ambient global store).
    * Centralize error translation.
    * Keep services thin, orchestration-only, no web leakage.
    """

    def __init__(self, store: UserRepository, *, ctx: ServiceContext | None = None) -> None:
        """
        Initialize the base service.

        :param store: Repository the service reads and writes.
        :type store: UserRepository
        :param ctx: Optional request-scoped context (tracing).
        :type ctx: ServiceContext | None
        """
        self.store = store
        self.ctx = ctx or ServiceContext()

    # -------------------------- Error handling ------------------------------

    def translate_exceptions(self, exc: Exception) -> Exception:
        """
        Map domain/service-level errors to API-level (HTTP) errors.

        :param exc: Exception raised within the service.
        :type exc: Exception
        :returns: Translated exception ready to be re-raised.
        :rtype: Exception
        """
        if isinstance(exc, NotFoundError):
            # → 404 Not Found
            return api_errors.NotFound(f"{exc.entity} not found")

        if isinstance(exc, RegistrationRejectedError):
            # → 400 Bad Request with every message, in order
            return api_errors.APIError(
                message=str(exc),
                status_code=400,
                code="validation_error",
                details={"errors": exc.errors},
            )

        # Fallback: return untouched (will bubble up to Flask handler)
        return exc
