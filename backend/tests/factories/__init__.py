"""Factory Boy helpers producing registration submissions."""

from __future__ import annotations

from .registration import RegistrationDataFactory

__all__ = ["RegistrationDataFactory"]
