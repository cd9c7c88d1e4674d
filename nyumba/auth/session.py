"""Current-user session store.

The browser front end kept the signed-in user as JSON in ``localStorage``.
:class:`SessionStore` keeps the same contract over any key-value
:class:`Storage`; :class:`InMemoryStorage` is the default and the only one
shipped, since nothing here is persisted.

Typical usage::

    session = SessionStore()
    session.set_current_user(user)
    session.current_user()        # -> User
    session.clear()
"""

from __future__ import annotations

import logging
from typing import Any, Protocol

from pydantic import ValidationError

from nyumba.auth.models import User

__all__ = ["Storage", "InMemoryStorage", "SessionStore", "CURRENT_USER_KEY"]

logger = logging.getLogger(__name__)

#: Storage key under which the current user is kept.
CURRENT_USER_KEY: str = "nyumba_current_user"


class Storage(Protocol):
    """Minimal key-value interface modelled on the Web Storage API."""

    def get_item(self, key: str) -> str | None: ...

    def set_item(self, key: str, value: str) -> None: ...

    def remove_item(self, key: str) -> None: ...


class InMemoryStorage:
    """Dict-backed :class:`Storage`."""

    def __init__(self) -> None:
        self._items: dict[str, str] = {}

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def __len__(self) -> int:
        return len(self._items)


class SessionStore:
    """Read and write the signed-in user.

    Args:
        storage: Backing key-value store; a fresh :class:`InMemoryStorage`
            when omitted.
    """

    def __init__(self, storage: Storage | None = None) -> None:
        self._storage: Storage = storage if storage is not None else InMemoryStorage()

    def current_user(self) -> User | None:
        """Return the stored user, or ``None``.

        A corrupt entry reads as signed-out rather than raising.
        """
        raw = self._storage.get_item(CURRENT_USER_KEY)
        if raw is None:
            return None
        try:
            return User.model_validate_json(raw)
        except ValidationError as exc:
            logger.warning("Discarding unreadable session entry: %s", exc.errors()[0]["msg"])
            return None

    def set_current_user(self, user: User) -> None:
        self._storage.set_item(CURRENT_USER_KEY, user.model_dump_json(by_alias=True))

    def clear(self) -> None:
        self._storage.remove_item(CURRENT_USER_KEY)

    def update_profile(self, **changes: Any) -> User | None:
        """Merge *changes* into the stored user and write it back.

        Returns:
            The updated user, or ``None`` when nobody is signed in.

        Raises:
            pydantic.ValidationError: If a changed field is invalid.
        """
        user = self.current_user()
        if user is None:
            return None
        updated = User.model_validate({**user.model_dump(), **changes})
        self.set_current_user(updated)
        return updated

    @property
    def is_signed_in(self) -> bool:
        return self.current_user() is not None
