"""Abstract interface (port) for the per-browser-session key/value store."""

from abc import ABC, abstractmethod


class SessionStore(ABC):
    """String key/value storage scoped to one browser session.

    Mirrors the browser's session storage: values are strings and a
    missing key reads as ``None``.
    """

    @abstractmethod
    def get_item(self, key: str) -> str | None:
        ...

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        ...

    @abstractmethod
    def remove_item(self, key: str) -> None:
        ...
