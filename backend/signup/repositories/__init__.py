"""Storage for accepted registrations."""

from __future__ import annotations

from .user import RecordsView, UserRepository

__all__ = ["RecordsView", "UserRepository"]
