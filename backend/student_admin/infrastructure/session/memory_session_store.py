"""In-memory session storage — one string key/value map per browser session."""

import logging
import uuid
from collections.abc import Callable

from student_admin.application.interfaces import SessionStore

logger = logging.getLogger(__name__)


class InMemorySessionStore(SessionStore):
    """Dict-backed SessionStore. Contents vanish with the process.

    ``on_first_write`` is called once, with the store, before the first
    ``set_item`` lands.
    """

    def __init__(
        self,
        on_first_write: Callable[["InMemorySessionStore"], None] | None = None,
    ) -> None:
        self._items: dict[str, str] = {}
        self._on_first_write = on_first_write

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        if self._on_first_write is not None:
            callback, self._on_first_write = self._on_first_write, None
            callback(self)
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def __len__(self) -> int:
        return len(self._items)


class SessionRegistry:
    """Maps session ids (from the session cookie) to their session stores.

    A session is only registered once something is written to it, so
    requests that merely read (the access guard, status checks, failed
    logins) never grow the registry.
    """

    def __init__(self) -> None:
        self._stores: dict[str, InMemorySessionStore] = {}

    @staticmethod
    def new_session_id() -> str:
        return uuid.uuid4().hex

    def get(self, session_id: str) -> InMemorySessionStore:
        """Return the store for ``session_id``; an unknown id gets an unregistered empty store."""
        store = self._stores.get(session_id)
        if store is None:
            store = InMemorySessionStore(
                on_first_write=lambda written: self._register(session_id, written),
            )
        return store

    def _register(self, session_id: str, store: InMemorySessionStore) -> None:
        self._stores.setdefault(session_id, store)
        logger.debug("Opened session %s", session_id)

    def discard(self, session_id: str) -> None:
        self._stores.pop(session_id, None)

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._stores

    @property
    def session_count(self) -> int:
        return len(self._stores)
