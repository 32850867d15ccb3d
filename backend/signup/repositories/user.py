"""In-memory repository holding accepted registrations.

The repository is the only owner of :class:`UserRecord` instances:

- Identifiers are allocated here, starting at 1, strictly increasing and
  never reused, even after deletions.
- Records keep insertion order.
- Every mutation, and any read-check-write sequence wrapped in
  :meth:`UserRepository.locked`, runs under one re-entrant lock so threaded
  WSGI servers cannot interleave them.

There is no persistence; the contents live as long as the owning
application instance.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import replace

from signup.services.registration.dto import UserRecord


class RecordsView:
    """Restartable, lazily iterated view over the stored records.

    Each iteration walks a snapshot taken when iteration starts, so records
    inserted or deleted meanwhile never break an iterator in flight.
    """

    __slots__ = ("_repo",)

    def __init__(self, repo: UserRepository) -> None:
        self._repo = repo

    def __iter__(self) -> Iterator[UserRecord]:
        yield from self._repo._snapshot()

    def __len__(self) -> int:
        return self._repo.count()


class UserRepository:
    """Ordered collection of :class:`UserRecord` keyed by identifier."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._records: dict[int, UserRecord] = {}
        self._next_id = 1

    @contextmanager
    def locked(self) -> Iterator[UserRepository]:
        """Hold the repository lock for a multi-step read/write sequence."""
        with self._lock:
            yield self

    # ------------------------------------------------------------------ #
    # Commands
    # ------------------------------------------------------------------ #

    def insert(self, draft: UserRecord) -> UserRecord:
        """Assign the next identifier to ``draft`` and store it.

        :param draft: Record without identifier (any ``id`` is overwritten).
        :returns: The stored record.
        """
        with self._lock:
            record = replace(draft, id=self._next_id)
            self._next_id += 1
            self._records[record.id] = record
            return record

    def delete_by_id(self, user_id: int) -> UserRecord | None:
        """Remove and return the record, or ``None`` when absent."""
        with self._lock:
            return self._records.pop(user_id, None)

    # ------------------------------------------------------------------ #
    # Queries
    # ------------------------------------------------------------------ #

    def list_all(self) -> RecordsView:
        return RecordsView(self)

    def get_by_id(self, user_id: int) -> UserRecord | None:
        with self._lock:
            return self._records.get(user_id)

    def email_exists(self, email: str) -> bool:
        """Case-sensitive match against currently stored emails."""
        with self._lock:
            return any(record.email == email for record in self._records.values())

    def count(self) -> int:
        with self._lock:
            return len(self._records)

    def _snapshot(self) -> tuple[UserRecord, ...]:
        with self._lock:
            return tuple(self._records.values())
