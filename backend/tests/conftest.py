"""Pytest fixtures building an isolated application per test.

Every test gets its own empty :class:`UserRepository`, injected into a fresh
Flask application, so registrations never leak between cases.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any

import pytest
from signup.core.config import TestingConfig
from signup.factory import create_app  # application factory under test
from signup.repositories.user import UserRepository
from signup.services.registration.service import RegistrationService

# Evaluation instant used by unit tests that need a stable "today"
FIXED_NOW = datetime(2026, 10, 18, 12, 0, tzinfo=timezone.utc)


@pytest.fixture()
def store() -> UserRepository:
    """Provide an empty in-memory repository."""
    return UserRepository()


@pytest.fixture()
def app(store):
    """Create a Flask application configured for testing.

    Returns
    -------
    flask.Flask
        Application instance with :class:`TestingConfig` applied and the
        ``store`` fixture injected.
    """
    app = create_app(TestingConfig, store=store)
    app.logger.setLevel("WARNING")
    return app


@pytest.fixture()
def client(app):
    """Return a Flask test client."""
    return app.test_client()


@pytest.fixture()
def registration_service(store) -> RegistrationService:
    """Registration service evaluating every submission at :data:`FIXED_NOW`."""
    return RegistrationService(store, clock=lambda: FIXED_NOW)


@pytest.fixture(scope="session")
def faker():
    """Provide a :class:`faker.Faker` instance seeded for deterministic tests."""
    from faker import Faker

    fk = Faker()
    Faker.seed(1337)
    return fk


@pytest.fixture()
def freeze_time() -> Callable[[str | None], Any]:
    """Factory returning :func:`freezegun.freeze_time`.

    Examples
    --------
    >>> def test_with_frozen_time(freeze_time):
    ...     with freeze_time("2024-01-01"):
    ...         ...
    """

    from freezegun import freeze_time as _freeze_time

    def _factory(target: str | None = None) -> Any:
        return _freeze_time(target or "2024-01-01")

    return _factory
