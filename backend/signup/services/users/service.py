"""Read and delete use cases over stored registrations."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from signup.services._shared.base import BaseService
from signup.services._shared.errors import NotFoundError
from signup.services.registration.dto import UserRecord

logger = logging.getLogger(__name__)


class UserService(BaseService):
    """Query and remove :class:`UserRecord` entries."""

    def list_users(self) -> Iterable[UserRecord]:
        """Return every stored record in insertion order."""
        return self.store.list_all()

    def get_user(self, user_id: int) -> UserRecord:
        """
        Fetch one record.

        :raises NotFoundError: When no record has ``user_id``.
        """
        record = self.store.get_by_id(user_id)
        if record is None:
            raise NotFoundError("User", user_id)
        return record

    def delete_user(self, user_id: int) -> UserRecord:
        """
        Delete one record; remaining identifiers are not renumbered.

        :raises NotFoundError: When no record has ``user_id``.
        """
        record = self.store.delete_by_id(user_id)
        if record is None:
            raise NotFoundError("User", user_id)
        logger.info("user.deleted", extra={"user_id": user_id})
        return record

    def count(self) -> int:
        return self.store.count()
